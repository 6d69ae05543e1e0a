import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging import setup_logging
from app.middleware.cors import setup_cors
from app.modules.bfhl.router import router as bfhl_router
from app.modules.bfhl.schemas import NotFoundResponse

setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(title="BFHL API")

setup_cors(app)

app.include_router(bfhl_router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # A known path hit with the wrong method is still an unmatched route.
    if exc.status_code in (404, 405):
        logger.info("No route for %s %s", request.method, request.url.path)
        return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())
    return await http_exception_handler(request, exc)
