from typing import Any, Optional

from pydantic import BaseModel


class BfhlResponse(BaseModel):
    is_success: bool
    official_email: str
    data: Optional[Any] = None
    error: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        # Exactly one of data/error is emitted, chosen by is_success.
        payload: dict[str, Any] = {
            "is_success": self.is_success,
            "official_email": self.official_email,
        }
        if self.is_success:
            payload["data"] = self.data
        else:
            payload["error"] = self.error or ""
        return payload


class HealthResponse(BaseModel):
    is_success: bool
    official_email: str


class NotFoundResponse(BaseModel):
    is_success: bool = False
    error: str = "Endpoint not found"
