"""Tests for skill handler wrapping and invocation."""
import pytest

from skill_gateway.adapter.skills import AskSkillInvoker, as_skill_handler, invoke_skill
from skill_gateway.utils.exceptions import SkillHandlerError


class TestAsSkillHandler:
    def test_plain_object_is_returned_as_is(self, echo_skill):
        assert as_skill_handler(echo_skill) is echo_skill

    def test_ask_skill_is_wrapped(self, ask_skill):
        handler = as_skill_handler(ask_skill)
        assert isinstance(handler, AskSkillInvoker)
        assert handler.skill is ask_skill

    @pytest.mark.parametrize("value", [None, {}, [], "skill", 42, object()])
    def test_rejects_non_skills(self, value):
        with pytest.raises(TypeError, match="not a skill"):
            as_skill_handler(value)

    def test_rejects_classes(self):
        class Skill:
            def invoke(self, event, context):
                return {}

        with pytest.raises(TypeError):
            as_skill_handler(Skill)


class TestAskSkillInvoker:
    def test_invoke_returns_serialized_response(self, ask_skill, launch_event):
        result = AskSkillInvoker(ask_skill).invoke(launch_event, {})

        assert isinstance(result, dict)
        assert result["version"] == "1.0"
        assert result["response"]["outputSpeech"]["ssml"] == "<speak>Success</speak>"

    def test_invalid_event(self, ask_skill):
        with pytest.raises(SkillHandlerError, match="not a valid request envelope"):
            AskSkillInvoker(ask_skill).invoke({"request": {"unserializable"}}, {})


class TestInvokeSkill:
    @pytest.mark.asyncio
    async def test_sync_skill(self, echo_skill):
        result = await invoke_skill(echo_skill, {"a": 1}, {})
        assert result["response"] == {"shouldEndSession": True}
        assert echo_skill.calls == [({"a": 1}, {})]

    @pytest.mark.asyncio
    async def test_async_skill(self, async_echo_skill):
        result = await invoke_skill(async_echo_skill, {}, {})
        assert result["response"] == {"async": True}

    @pytest.mark.asyncio
    async def test_failure_propagates(self, failing_skill):
        with pytest.raises(RuntimeError, match="Test skill error"):
            await invoke_skill(failing_skill, {}, {})
