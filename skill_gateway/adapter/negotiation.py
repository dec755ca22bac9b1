"""Minimal ``Accept`` header negotiation for JSON responses."""

from __future__ import annotations

# Media ranges that match a JSON response, most specific first.
_SPECIFICITY = {"application/json": 2, "application/*": 1, "*/*": 0}


def _quality(params: list[str]) -> float:
    for param in params:
        key, _, value = param.partition("=")
        if key.strip().lower() == "q":
            try:
                return float(value.strip())
            except ValueError:
                return 0.0
    return 1.0


def accepts_json(accept: str | None) -> bool:
    """Return ``True`` when a JSON response satisfies *accept*.

    A missing or blank header accepts anything.  Otherwise the most
    specific media range matching ``application/json`` decides
    (``application/json`` over ``application/*`` over ``*/*``), and its
    quality value must be non-zero.  ``*/*, application/json;q=0`` is
    therefore a refusal.
    """
    if accept is None or not accept.strip():
        return True

    best_rank = -1
    best_quality = 0.0
    for media_range in accept.split(","):
        media_type, *params = media_range.split(";")
        rank = _SPECIFICITY.get(media_type.strip().lower())
        if rank is None:
            continue
        quality = _quality(params)
        if rank > best_rank:
            best_rank, best_quality = rank, quality
        elif rank == best_rank:
            best_quality = max(best_quality, quality)

    return best_rank >= 0 and best_quality > 0
