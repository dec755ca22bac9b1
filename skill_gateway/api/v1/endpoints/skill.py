"""Skill endpoint -- hands every request to the :class:`RequestAdapter`.

All methods are routed here so that content negotiation (406) and the
method check (405) are decided by the adapter, in that order.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from skill_gateway.adapter import InboundRequest, RequestAdapter
from skill_gateway.api.v1.schemas.common import ErrorResponse
from skill_gateway.dependencies import get_request_adapter

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


async def handle_skill_request(
    request: Request,
    adapter: RequestAdapter = Depends(get_request_adapter),
) -> JSONResponse:
    raw_body = await request.body()
    inbound = InboundRequest(
        method=request.method,
        accept=request.headers.get("accept"),
        headers=request.headers,
        raw_body=raw_body.decode("utf-8", errors="replace") if raw_body else None,
    )

    outbound = await adapter.handle(inbound)

    return JSONResponse(
        status_code=outbound.status_code,
        content=outbound.body,
        media_type=outbound.content_type,
    )


def create_router(path: str) -> APIRouter:
    """Return a router serving :func:`handle_skill_request` at *path*."""
    router = APIRouter()
    router.add_api_route(
        "/" + path.strip("/"),
        handle_skill_request,
        methods=_ALL_METHODS,
        responses={
            400: {"model": ErrorResponse, "description": "Missing or invalid signature"},
            405: {"model": ErrorResponse, "description": "Method is not POST"},
            406: {"model": ErrorResponse, "description": "Client does not accept JSON"},
            500: {"description": "Skill failed; body is the error message"},
        },
        summary="Handle a skill request",
        description=(
            "Verify that the request was signed by the assistant platform, then "
            "invoke the skill with the JSON body and return its response."
        ),
    )
    return router
