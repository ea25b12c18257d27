from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .ingest import TOOLS, dispatch, get_ingestor, set_ingestor

log = logging.getLogger("mcp.gitingest.tools")

__all__ = ["TOOLS", "dispatch", "get_ingestor", "register", "set_ingestor"]


def register(mcp: FastMCP) -> None:
    for name, spec in TOOLS.items():
        # one JSON text block per reply; no structured output schema
        mcp.add_tool(spec.handler, name=name, title=spec.title, structured_output=False)
        log.debug("tool.register", extra={"tool": name})
