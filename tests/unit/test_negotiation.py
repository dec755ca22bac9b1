"""Tests for Accept header negotiation."""
import pytest

from skill_gateway.adapter.negotiation import accepts_json


@pytest.mark.parametrize(
    "accept",
    [
        None,
        "",
        "application/json",
        "*/*",
        "application/*",
        "text/html, application/json;q=0.5",
        "Application/JSON",
        "application/json;q=0.5, */*;q=0",
        "application/*;q=0.2, */*;q=0",
    ],
)
def test_accepts_json(accept):
    assert accepts_json(accept) is True


@pytest.mark.parametrize(
    "accept",
    [
        "text/html",
        "text/plain, image/png",
        "application/json;q=0",
        "application/xml;q=1, */*;q=0",
        "application/json;q=abc",
        "*/*, application/json;q=0",
        "application/*, application/json;q=0",
        "application/json;q=0, application/*;q=1, */*;q=1",
    ],
)
def test_rejects_non_json(accept):
    assert accepts_json(accept) is False
