"""Skill handler wrappers.

The adapter talks to any object exposing ``invoke(event, context)``.  ASK
SDK ``CustomSkill`` instances work on model objects rather than JSON, so
they are wrapped in :class:`AskSkillInvoker` which handles the conversion.
"""

from __future__ import annotations

import asyncio
import inspect
import json
from typing import Any, Protocol, runtime_checkable

from ask_sdk_core.serialize import DefaultSerializer
from ask_sdk_core.skill import CustomSkill
from ask_sdk_model import RequestEnvelope

from skill_gateway.utils.exceptions import SkillHandlerError


@runtime_checkable
class SkillHandler(Protocol):
    def invoke(self, event: Any, context: Any) -> Any:
        ...


class AskSkillInvoker:
    """Run an ASK SDK :class:`CustomSkill` against a JSON request envelope."""

    def __init__(self, skill: CustomSkill, serializer: DefaultSerializer | None = None):
        self.skill = skill
        self._serializer = serializer or DefaultSerializer()

    def invoke(self, event: Any, context: Any) -> Any:
        try:
            request_envelope = self._serializer.deserialize(
                payload=json.dumps(event), obj_type=RequestEnvelope
            )
        except Exception as exc:
            raise SkillHandlerError(f"Event is not a valid request envelope: {exc}") from exc

        response_envelope = self.skill.invoke(request_envelope, context)
        return self._serializer.serialize(response_envelope)


def as_skill_handler(skill: Any) -> SkillHandler:
    """Validate *skill* and return something the adapter can invoke.

    Raises :class:`TypeError` when *skill* is missing or has no callable
    ``invoke``.
    """
    if isinstance(skill, CustomSkill):
        return AskSkillInvoker(skill)
    if (
        skill is None
        or isinstance(skill, (dict, list, str, bytes, int, float, bool, type))
        or not callable(getattr(skill, "invoke", None))
    ):
        raise TypeError("Option skill is not a skill handler")
    return skill


async def invoke_skill(skill: SkillHandler, event: Any, context: dict) -> Any:
    """Call ``skill.invoke`` without blocking the event loop.

    Coroutine functions are awaited directly; synchronous handlers (the ASK
    SDK is synchronous) run in a worker thread.
    """
    if inspect.iscoroutinefunction(skill.invoke):
        return await skill.invoke(event, context)

    result = await asyncio.to_thread(skill.invoke, event, context)
    if inspect.isawaitable(result):
        result = await result
    return result
