"""Locate a skill object from a ``module:attribute`` import path."""

import importlib
import inspect
from typing import Any

from skill_gateway.utils.exceptions import SkillLoadError
from skill_gateway.utils.logging import get_logger

logger = get_logger(__name__)


def load_skill(target: str) -> Any:
    """Import *target* and return the skill it names.

    Parameters
    ----------
    target:
        ``"package.module:attribute"``.  Dotted attribute paths are
        followed (``"pkg.mod:builder.skill"``).  When the attribute is a
        function it is treated as a factory and called with no arguments.

    Raises
    ------
    SkillLoadError
        If the path is malformed, the module cannot be imported or the
        attribute does not exist.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise SkillLoadError(target, "expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SkillLoadError(target, str(exc)) from exc

    obj: Any = module
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise SkillLoadError(target, f"no attribute '{attr}'") from exc

    if inspect.isfunction(obj):
        try:
            obj = obj()
        except Exception as exc:
            raise SkillLoadError(target, f"factory raised {type(exc).__name__}: {exc}") from exc

    logger.info("skill_loaded", target=target, skill_type=type(obj).__name__)
    return obj
