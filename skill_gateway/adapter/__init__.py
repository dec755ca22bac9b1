"""Request adapter -- signature validation and skill dispatch, independent of the web framework."""

from skill_gateway.adapter.handler import AdapterOptions, RequestAdapter, create_request_handler
from skill_gateway.adapter.models import InboundRequest, OutboundResponse
from skill_gateway.adapter.verification import AlexaSignatureVerifier, SignatureVerifier

__all__ = [
    "AdapterOptions",
    "RequestAdapter",
    "create_request_handler",
    "InboundRequest",
    "OutboundResponse",
    "AlexaSignatureVerifier",
    "SignatureVerifier",
]
