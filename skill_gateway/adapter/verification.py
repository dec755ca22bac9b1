"""Request signature verification.

Checking that a request was really sent by Alexa (certificate chain
download and validation, then an RSA signature check over the raw body) is
delegated to ``ask-sdk-webservice-support``.  The adapter only needs the
narrow :class:`SignatureVerifier` interface, so tests and alternative
deployments can supply their own verifier.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

from ask_sdk_webservice_support.verifier import RequestVerifier

from skill_gateway.utils.logging import get_logger

logger = get_logger(__name__)

CERT_CHAIN_URL_HEADER = "signaturecertchainurl"
SIGNATURE_HEADER = "signature"


@runtime_checkable
class SignatureVerifier(Protocol):
    """Anything able to verify a signed request.

    ``verify`` returns ``None`` on success and raises on failure.
    """

    async def verify(
        self, cert_chain_url: str, signature: str, serialized_body: str
    ) -> None:
        ...


VerifierFunc = Callable[[str, str, str], Union[Awaitable[Any], Any]]


class AlexaSignatureVerifier:
    """Verify Alexa request signatures with the ASK SDK ``RequestVerifier``.

    The SDK verifier is synchronous and may download the signing certificate
    chain, so it runs in a worker thread.  Its ``VerificationException`` is
    propagated unchanged.
    """

    def __init__(self, request_verifier: RequestVerifier | None = None) -> None:
        self._verifier = request_verifier or RequestVerifier(
            signature_cert_chain_url_key=CERT_CHAIN_URL_HEADER,
            signature_key=SIGNATURE_HEADER,
        )

    async def verify(
        self, cert_chain_url: str, signature: str, serialized_body: str
    ) -> None:
        headers = {
            CERT_CHAIN_URL_HEADER: cert_chain_url,
            SIGNATURE_HEADER: signature,
        }
        await asyncio.to_thread(
            self._verifier.verify,
            headers=headers,
            serialized_request_env=serialized_body,
            deserialized_request_env=None,
        )
        logger.debug("signature_verified", cert_chain_url=cert_chain_url)


class CallableVerifier:
    """Adapt a plain ``(url, signature, body)`` function to :class:`SignatureVerifier`.

    Coroutine functions are awaited; regular functions run in a worker
    thread.  A return value of ``False`` counts as a failed verification.
    """

    def __init__(self, func: VerifierFunc) -> None:
        self._func = func

    async def verify(
        self, cert_chain_url: str, signature: str, serialized_body: str
    ) -> None:
        if inspect.iscoroutinefunction(self._func):
            result = await self._func(cert_chain_url, signature, serialized_body)
        else:
            result = await asyncio.to_thread(
                self._func, cert_chain_url, signature, serialized_body
            )
            if inspect.isawaitable(result):
                result = await result
        if result is False:
            raise ValueError("Signature verification returned False")


def as_verifier(verifier: SignatureVerifier | VerifierFunc | None) -> SignatureVerifier:
    """Normalise *verifier* into a :class:`SignatureVerifier`.

    ``None`` selects the default :class:`AlexaSignatureVerifier`.
    """
    if verifier is None:
        return AlexaSignatureVerifier()
    if isinstance(verifier, SignatureVerifier):
        return verifier
    if callable(verifier):
        return CallableVerifier(verifier)
    raise TypeError(f"Verifier must be callable, got {type(verifier).__name__}")
