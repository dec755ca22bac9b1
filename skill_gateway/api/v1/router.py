from fastapi import APIRouter

from skill_gateway.api.v1.endpoints import health, skill


def build_router(skill_path: str) -> APIRouter:
    """Assemble the API router with the skill endpoint mounted at *skill_path*."""
    v1_router = APIRouter()
    v1_router.include_router(health.router, tags=["health"])
    v1_router.include_router(skill.create_router(skill_path), tags=["skill"])
    return v1_router
