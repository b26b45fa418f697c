import re

_OPENING_FENCE = re.compile(r"^\s*```(?:html?)?[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```html ... ``` fence and trim the result."""
    stripped = _OPENING_FENCE.sub("", text, count=1)
    stripped = _CLOSING_FENCE.sub("", stripped, count=1)
    return stripped.strip()
