"""Request adapter -- validates an Alexa skill request and dispatches it.

For every :class:`InboundRequest` the :class:`RequestAdapter`:

1. Rejects requests that will not accept a JSON response (406).
2. Rejects anything other than ``POST`` (405).
3. When validation is enabled, requires the signature headers and a body
   and verifies the signature (400 on any failure).
4. Invokes the skill with the request body and an empty context and
   shapes the outcome into an :class:`OutboundResponse` (200 or 500).

Rejections in steps 1-3 are raised as :class:`ClientError` subclasses; a
failing skill never raises, it produces a 500 response whose body is the
error message.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from skill_gateway.adapter.models import InboundRequest, OutboundResponse
from skill_gateway.adapter.negotiation import accepts_json
from skill_gateway.adapter.skills import SkillHandler, as_skill_handler, invoke_skill
from skill_gateway.adapter.verification import (
    CERT_CHAIN_URL_HEADER,
    SIGNATURE_HEADER,
    SignatureVerifier,
    VerifierFunc,
    as_verifier,
)
from skill_gateway.utils.exceptions import (
    InvalidSignatureError,
    MalformedRequestError,
    MethodNotAllowedError,
    MissingSignatureError,
    NotAcceptableError,
)
from skill_gateway.utils.logging import get_logger

logger = get_logger(__name__)


class AdapterOptions(BaseModel):
    """Options accepted by :class:`RequestAdapter`.

    Attributes:
        skill: The skill handler; anything exposing ``invoke(event, context)``
            or an ASK SDK ``CustomSkill``.
        validate_requests: Verify request signatures.  Only an explicit
            ``False`` turns verification off (development use only).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    skill: Any = None
    validate_requests: Any = True

    @field_validator("validate_requests")
    @classmethod
    def _only_false_disables(cls, value: Any) -> bool:
        return value is not False


def _error_message(exc: BaseException) -> str:
    message = str(exc)
    return message if message else type(exc).__name__


class RequestAdapter:
    """Validate inbound skill requests and relay them to a skill.

    Parameters
    ----------
    options:
        Adapter options; see :class:`AdapterOptions`.
    verifier:
        Signature verifier.  Defaults to the ASK SDK backed
        :class:`~skill_gateway.adapter.verification.AlexaSignatureVerifier`.

    Raises
    ------
    TypeError
        If the configured skill is not a usable skill handler.
    """

    def __init__(
        self,
        options: AdapterOptions,
        verifier: SignatureVerifier | VerifierFunc | None = None,
    ) -> None:
        self.skill: SkillHandler = as_skill_handler(options.skill)
        self.validate_requests: bool = options.validate_requests
        self._verifier = as_verifier(verifier) if self.validate_requests else None

    async def handle(self, request: InboundRequest) -> OutboundResponse:
        """Process *request* and return the response to send back."""
        if not accepts_json(request.accept):
            raise NotAcceptableError()
        if request.method.upper() != "POST":
            raise MethodNotAllowedError(request.method)

        if self.validate_requests:
            await self._verify(request)

        event = self._event(request)
        context: dict = {}
        logger.info(
            "handling_validated_request",
            headers=request.headers,
            event=event,
            context=context,
        )

        try:
            skill_response = await invoke_skill(self.skill, event, context)
        except Exception as exc:
            logger.error(
                "skill_invocation_failed",
                error_type=type(exc).__name__,
                detail=_error_message(exc),
            )
            return OutboundResponse(status_code=500, body=_error_message(exc))

        logger.info("returning_skill_response", response=skill_response)
        return OutboundResponse(status_code=200, body=skill_response)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _verify(self, request: InboundRequest) -> None:
        cert_chain_url = request.headers.get(CERT_CHAIN_URL_HEADER)
        if cert_chain_url is None:
            raise MissingSignatureError("Signature certificate chain URL missing")
        signature = request.headers.get(SIGNATURE_HEADER)
        if signature is None:
            raise MissingSignatureError("Signature missing")
        if request.body is None and not request.raw_body:
            raise MissingSignatureError("Request body missing")

        serialized_body = (
            request.raw_body if request.raw_body else json.dumps(request.body)
        )
        try:
            await self._verifier.verify(cert_chain_url, signature, serialized_body)
        except Exception as exc:
            logger.debug(
                "signature_verification_failed",
                error_type=type(exc).__name__,
                detail=_error_message(exc),
            )
            raise InvalidSignatureError() from exc

    @staticmethod
    def _event(request: InboundRequest) -> Any:
        if request.body is not None or not request.raw_body:
            return request.body
        try:
            return json.loads(request.raw_body)
        except ValueError as exc:
            raise MalformedRequestError("Request body is not valid JSON") from exc


def create_request_handler(
    skill: Any = None,
    validate: Any = True,
    verifier: SignatureVerifier | VerifierFunc | None = None,
) -> RequestAdapter:
    """Build a :class:`RequestAdapter` from keyword options."""
    return RequestAdapter(
        AdapterOptions(skill=skill, validate_requests=validate),
        verifier=verifier,
    )
