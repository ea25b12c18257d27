"""Error classification for tool replies."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import ValidationError

INVALID_ARGUMENTS = "Invalid arguments"

# Context keys echoed back so a caller can match a failure to its request.
CONTEXT_KEYS = ("repo_url", "language")


def error_message(error: object) -> str:
    """Extract a human-readable message from whatever the ingestion engine raised.

    Exceptions contribute their own text; anything else is stringified. An
    empty message falls back to the error's type name so replies never carry
    a blank message.
    """
    text = str(error).strip()
    if text:
        return text
    return type(error).__name__


def validation_message(exc: ValidationError) -> str:
    """Compact one-line summary of a pydantic ValidationError."""
    msgs = []
    for err in exc.errors():
        loc = "/".join(str(p) for p in err.get("loc", ())) or "<root>"
        msgs.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(msgs) or error_message(exc)


def failure_context(arguments: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Pick the correlating fields out of raw tool arguments."""
    if not arguments:
        return {}
    return {k: arguments[k] for k in CONTEXT_KEYS if k in arguments}
