import pytest
from ask_sdk_core.dispatch_components import AbstractRequestHandler
from ask_sdk_core.skill_builder import SkillBuilder


class EchoSkill:
    """Returns a fixed response and records what it was called with."""

    def __init__(self):
        self.calls = []

    def invoke(self, event, context):
        self.calls.append((event, context))
        return {"version": "1.0", "response": {"shouldEndSession": True}}


class AsyncEchoSkill(EchoSkill):
    async def invoke(self, event, context):
        self.calls.append((event, context))
        return {"version": "1.0", "response": {"async": True}}


class FailingSkill:
    def invoke(self, event, context):
        raise RuntimeError("Test skill error")


class RecordingVerifier:
    """Verifier stub; fails with *error* when given, otherwise accepts."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    async def verify(self, cert_chain_url, signature, serialized_body):
        self.calls.append((cert_chain_url, signature, serialized_body))
        if self.error is not None:
            raise self.error


class _SpeakSuccessHandler(AbstractRequestHandler):
    def can_handle(self, handler_input):
        return True

    def handle(self, handler_input):
        return handler_input.response_builder.speak("Success").response


class _RaisingHandler(AbstractRequestHandler):
    def can_handle(self, handler_input):
        return True

    def handle(self, handler_input):
        raise ValueError("Test skill error")


@pytest.fixture
def echo_skill():
    return EchoSkill()


@pytest.fixture
def async_echo_skill():
    return AsyncEchoSkill()


@pytest.fixture
def failing_skill():
    return FailingSkill()


@pytest.fixture
def accepting_verifier():
    return RecordingVerifier()


@pytest.fixture
def rejecting_verifier():
    return RecordingVerifier(error=ValueError("Test verification error"))


@pytest.fixture
def ask_skill():
    sb = SkillBuilder()
    sb.add_request_handler(_SpeakSuccessHandler())
    return sb.create()


@pytest.fixture
def failing_ask_skill():
    sb = SkillBuilder()
    sb.add_request_handler(_RaisingHandler())
    return sb.create()


@pytest.fixture
def launch_event():
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.test",
            "application": {"applicationId": "amzn1.ask.skill.test"},
            "user": {"userId": "amzn1.ask.account.test"},
        },
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.test"},
                "user": {"userId": "amzn1.ask.account.test"},
                "device": {"deviceId": "amzn1.ask.device.test", "supportedInterfaces": {}},
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "test-token",
            }
        },
        "request": {
            "type": "LaunchRequest",
            "requestId": "amzn1.echo-api.request.test",
            "timestamp": "2024-01-01T00:00:00Z",
            "locale": "en-US",
        },
    }


@pytest.fixture
def signed_headers():
    return {
        "SignatureCertChainUrl": "https://s3.amazonaws.com/echo.api/echo-api-cert.pem",
        "Signature": "c29tZXNpZ25hdHVyZQ==",
    }
