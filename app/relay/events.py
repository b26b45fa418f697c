"""Server-sent-event framing for the generation stream.

Each event is one `data: <json>` line followed by a blank line. Payloads are
`{"chunk": str}`, `{"done": true}` or `{"error": str}`.
"""

import json

EVENT_PREFIX = "data: "
EVENT_TERMINATOR = "\n\n"

SSE_MEDIA_TYPE = "text/event-stream"
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def format_event(payload: dict[str, object]) -> str:
    return f"{EVENT_PREFIX}{json.dumps(payload)}{EVENT_TERMINATOR}"


def chunk_event(fragment: str) -> str:
    return format_event({"chunk": fragment})


def done_event() -> str:
    return format_event({"done": True})


def error_event(message: str) -> str:
    return format_event({"error": message})


def parse_event(raw: str) -> dict[str, object]:
    """Decode one framed event back into its payload."""
    if not raw.startswith(EVENT_PREFIX) or not raw.endswith(EVENT_TERMINATOR):
        raise ValueError(f"Malformed event: {raw!r}")
    payload = json.loads(raw[len(EVENT_PREFIX) : -len(EVENT_TERMINATOR)])
    if not isinstance(payload, dict):
        raise ValueError("Event payload must be an object")
    return payload
