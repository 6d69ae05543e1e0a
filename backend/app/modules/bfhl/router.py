import json
from functools import partial

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.agents.answer import create_answer_agent
from app.core.config import Settings, get_settings
from app.modules.bfhl.schemas import HealthResponse
from app.modules.bfhl.service import AgentFactory, process_request

router = APIRouter(tags=["BFHL"])


def get_answer_agent_factory(settings: Settings = Depends(get_settings)) -> AgentFactory:
    return partial(create_answer_agent, settings=settings)


@router.post("/bfhl")
async def bfhl_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    agent_factory: AgentFactory = Depends(get_answer_agent_factory),
):
    body = await request.body()
    if not body.strip():
        payload = {}
    else:
        try:
            payload = json.loads(body)
        except ValueError:
            # Rejected by the dispatcher as a non-object body.
            payload = None

    status_code, response = await process_request(payload, settings, agent_factory)
    return JSONResponse(status_code=status_code, content=response.to_payload())


@router.get("/health", response_model=HealthResponse)
async def health_endpoint(settings: Settings = Depends(get_settings)):
    return HealthResponse(is_success=True, official_email=settings.OFFICIAL_EMAIL)


@router.get("/")
async def root_endpoint():
    return {
        "message": "BFHL API is running",
        "endpoints": {
            "POST /bfhl": "Main API endpoint",
            "GET /health": "Health check endpoint",
        },
    }
