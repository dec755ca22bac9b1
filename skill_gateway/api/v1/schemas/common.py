"""Common response schemas used across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned when a request is rejected before reaching the skill."""

    error: str
    detail: str = ""


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    validate_requests: bool
