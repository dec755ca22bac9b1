"""FastAPI dependency functions for injection into endpoint handlers."""

from __future__ import annotations

from fastapi import Request

from skill_gateway.adapter import RequestAdapter


def get_request_adapter(request: Request) -> RequestAdapter:
    """Return the :class:`RequestAdapter` stored on ``app.state`` by :func:`create_app`."""
    return request.app.state.request_adapter
