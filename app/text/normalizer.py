"""Whitespace cleanup and length capping for text sent to the generator."""

import re

MAX_PAYLOAD_CHARS = 15000
TRUNCATION_MARKER = "\n\n[... content truncated for length ...]"

_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def is_capped(text: str) -> bool:
    """True when text has the shape of a truncating clean() result."""
    return (
        len(text) == MAX_PAYLOAD_CHARS + len(TRUNCATION_MARKER)
        and text.endswith(TRUNCATION_MARKER)
    )


def _is_normalized_prefix(text: str) -> bool:
    # A cut may end on a space or newline, so only the leading edge must be stripped.
    return (
        not text[:1].isspace()
        and all(run.group() == " " for run in _HORIZONTAL_WHITESPACE.finditer(text))
        and _EXCESS_NEWLINES.search(text) is None
    )


def clean(text: str | None) -> str:
    """Normalize extracted document text into a bounded payload.

    Steps, in order: unify line endings, collapse horizontal whitespace runs
    to one space, strip, collapse 3+ newlines to two, then cap the length.
    A capped result ends with TRUNCATION_MARKER and is returned unchanged
    when cleaned again. Capped-shaped input whose body still needs cleaning
    goes through the steps like any other text.

    Never raises; an empty result means nothing usable was extracted.
    """
    if not text:
        return ""
    if is_capped(text) and _is_normalized_prefix(text[: -len(TRUNCATION_MARKER)]):
        return text
    cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = _HORIZONTAL_WHITESPACE.sub(" ", cleaned)
    cleaned = cleaned.strip()
    cleaned = _EXCESS_NEWLINES.sub("\n\n", cleaned)
    if len(cleaned) > MAX_PAYLOAD_CHARS:
        cleaned = cleaned[:MAX_PAYLOAD_CHARS] + TRUNCATION_MARKER
    return cleaned
