"""Data models passed in and out of the request adapter."""

from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

JSON_CONTENT_TYPE = "application/json"


class InboundRequest(BaseModel):
    """The parts of an HTTP request the adapter needs to see.

    Header names are normalised to lower case so lookups such as
    ``headers["signaturecertchainurl"]`` work regardless of how the
    client spelled them.
    """

    method: str
    accept: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None
    raw_body: str | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def _lower_case_headers(cls, value: Mapping[str, str] | None) -> dict[str, str]:
        if value is None:
            return {}
        return {str(k).lower(): v for k, v in value.items()}


class OutboundResponse(BaseModel):
    """Status, content type and JSON body produced for a request."""

    status_code: int
    content_type: str = JSON_CONTENT_TYPE
    body: Any = None
