from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

# attributes every LogRecord carries; anything else arrived through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def preview(text: str, limit: int = 300) -> str:
    """Single-line excerpt of a summary for the `tool.response` log entry."""
    flat = " ".join(text.split())
    return flat if len(flat) <= limit else flat[: limit - 1] + "…"


class ExtraJSONFormatter(logging.Formatter):
    """
    Format: "YYYY-mm-dd HH:MM:SS.mmm | LEVEL | logger | message | {json of extras}"
    The extras column is left out when the record has none.
    """

    default_msec_format = "%s.%03d"

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        columns = [self.formatTime(record), record.levelname, record.name, record.message]
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if extras:
            columns.append(json.dumps(extras, ensure_ascii=False, default=str))
        line = " | ".join(columns)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """
    Install the extras formatter on the root logger once per process.
    stdio transport owns stdout, so callers pass sys.stderr there.
    """
    root = logging.getLogger()
    if getattr(root, "_mcp_logging_configured", False):
        return

    lvl = logging.getLevelName(str(level).upper())
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(ExtraJSONFormatter())
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(lvl if isinstance(lvl, int) else logging.INFO)
    root._mcp_logging_configured = True  # type: ignore[attr-defined]
