from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from skill_gateway import __version__
from skill_gateway.adapter import create_request_handler
from skill_gateway.adapter.loader import load_skill
from skill_gateway.adapter.verification import SignatureVerifier, VerifierFunc
from skill_gateway.api.v1.middleware.error_handler import ErrorHandlerMiddleware
from skill_gateway.api.v1.middleware.logging_middleware import LoggingMiddleware
from skill_gateway.api.v1.router import build_router
from skill_gateway.config import settings
from skill_gateway.utils.exceptions import SkillLoadError
from skill_gateway.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(debug=settings.debug)
    logger = get_logger("startup")
    adapter = app.state.request_adapter
    logger.info(
        "Starting skill gateway",
        version=__version__,
        skill_type=type(adapter.skill).__name__,
        validate_requests=adapter.validate_requests,
    )
    if not adapter.validate_requests:
        logger.warning("Request signature validation is disabled")

    yield

    logger.info("Shutting down")


def create_app(
    skill: Any = None,
    validate: bool | None = None,
    verifier: SignatureVerifier | VerifierFunc | None = None,
    skill_path: str | None = None,
) -> FastAPI:
    """Build the gateway application.

    Arguments left as ``None`` fall back to :data:`settings`; in particular
    the skill is imported from ``settings.skill`` when not passed in.
    """
    if skill is None:
        if not settings.skill:
            raise SkillLoadError("", "no skill given and SKILL_GATEWAY_SKILL is not set")
        skill = load_skill(settings.skill)
    if validate is None:
        validate = settings.validate_requests

    app = FastAPI(
        title="Skill Gateway",
        description="Validates Alexa skill requests and dispatches them to a skill",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.request_adapter = create_request_handler(
        skill=skill, validate=validate, verifier=verifier
    )

    # The last middleware added is the outermost.
    # 1. Error handler (turns gateway exceptions into JSON responses)
    app.add_middleware(ErrorHandlerMiddleware)
    # 2. Request/response logger (sees the final status code)
    app.add_middleware(LoggingMiddleware)

    app.include_router(build_router(skill_path or settings.skill_path))

    return app
