"""
Response envelopes.

Every API response is wrapped as
    {"success"|"error": <kind>, "message": <str>, "data": <payload>}
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SuccessEnvelope(BaseModel):
    """Envelope for a successful operation."""

    model_config = ConfigDict(frozen=True)

    success: str
    message: str
    data: Any = None


class ErrorEnvelope(BaseModel):
    """Envelope for a failed operation."""

    model_config = ConfigDict(frozen=True)

    error: str
    message: str
    data: Any = None


def error_response(kind: str, message: str, data: Any) -> ErrorEnvelope:
    return ErrorEnvelope(error=kind, message=message, data=data)


def success_response(kind: str, message: str, data: Any) -> SuccessEnvelope:
    return SuccessEnvelope(success=kind, message=message, data=data)
