from fastapi import APIRouter, Depends

from skill_gateway import __version__
from skill_gateway.adapter import RequestAdapter
from skill_gateway.api.v1.schemas.common import HealthResponse
from skill_gateway.dependencies import get_request_adapter

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    adapter: RequestAdapter = Depends(get_request_adapter),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service="skill-gateway",
        version=__version__,
        validate_requests=adapter.validate_requests,
    )
