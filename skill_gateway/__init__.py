"""Skill gateway -- validates Alexa skill requests and dispatches them to a skill."""

__version__ = "0.1.0"
