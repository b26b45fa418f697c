"""Pulls generated text out of provider responses of varying shape.

Providers put the text on a top-level field, under a candidates/parts
structure, or under chat choices. Each strategy inspects one shape and
returns None when it does not apply; the first non-empty string wins.
"""

from collections.abc import Callable, Mapping
from typing import Any

ExtractionStrategy = Callable[[Any], str | None]


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(items: Any) -> Any:
    if isinstance(items, (list, tuple)) and items:
        return items[0]
    return None


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _candidate_text(candidates: Any) -> str | None:
    candidate = _first(candidates)
    content = _field(candidate, "content") or _field(candidate, "output")
    part = _first(_field(content, "parts"))
    return _as_text(_field(part, "text"))


def top_level_text(payload: Any) -> str | None:
    return _as_text(_field(payload, "text"))


def candidate_part_text(payload: Any) -> str | None:
    return _candidate_text(_field(payload, "candidates"))


def nested_response_text(payload: Any) -> str | None:
    return _candidate_text(_field(_field(payload, "response"), "candidates"))


def choice_delta_text(payload: Any) -> str | None:
    choice = _first(_field(payload, "choices"))
    return _as_text(_field(_field(choice, "delta"), "content"))


def choice_message_text(payload: Any) -> str | None:
    choice = _first(_field(payload, "choices"))
    return _as_text(_field(_field(choice, "message"), "content"))


EXTRACTION_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    top_level_text,
    candidate_part_text,
    nested_response_text,
    choice_delta_text,
    choice_message_text,
)


def extract_text(
    payload: Any,
    strategies: tuple[ExtractionStrategy, ...] = EXTRACTION_STRATEGIES,
) -> str:
    """Return the first text any strategy finds, or an empty string."""
    for strategy in strategies:
        text = strategy(payload)
        if text:
            return text
    return ""
