from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from . import __version__
from .tools import TOOLS, dispatch
from .tools import register as register_tools

logger = logging.getLogger("mcp.gitingest.server")

SERVER_NAME = "GitIngest MCP Server"
SERVER_INSTRUCTIONS = (
    "MCP server providing GitIngest functionality for analyzing GitHub repositories. "
    "Use get_repo_structure for a quick overview, get_repo_docs for documentation, "
    "analyze_code_files for one language, or ingest_github_repo for everything. "
    "Every tool replies with one JSON document whose `status` is success or failure."
)


class GitIngestMCP(FastMCP):
    """FastMCP server whose ingestion tools validate their own arguments.

    FastMCP would turn a schema violation into a protocol-level tool error;
    here it becomes a `failure` reply like any other, so callers only ever
    inspect `status`.
    """

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Sequence[Any] | Dict[str, Any]:
        if name not in TOOLS:
            return await super().call_tool(name, arguments)
        text = await dispatch(name, arguments)
        return [TextContent(type="text", text=text)]


mcp = GitIngestMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)
mcp._mcp_server.version = __version__

register_tools(mcp)
logger.debug("server.tools", extra={"tools": list(TOOLS), "version": __version__})
