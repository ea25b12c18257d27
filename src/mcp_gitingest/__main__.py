from __future__ import annotations

import logging
import sys

from .server import mcp
from .settings import TRANSPORTS, Settings
from .utils.logging import setup_logging


def main() -> None:
    """
    Entry point for running the server via the official SDK runner.

    Examples:
      MCP_TRANSPORT=stdio           python -m mcp_gitingest
      MCP_TRANSPORT=sse             python -m mcp_gitingest   # served at /sse
      MCP_TRANSPORT=streamable-http python -m mcp_gitingest   # served at /mcp
    """
    settings = Settings.from_env()
    transport = settings.transport

    # stdout carries the protocol in stdio mode
    setup_logging(settings.log_level, stream=sys.stderr if transport == "stdio" else sys.stdout)
    log = logging.getLogger(settings.service_name)

    if any(a in ("-h", "--help") for a in sys.argv[1:]):
        sys.stderr.write(
            "mcp-gitingest: runs the GitIngest MCP server using the official SDK runner.\n"
            f"MCP_TRANSPORT is one of: {', '.join(TRANSPORTS)} (default stdio).\n"
        )
        sys.stderr.flush()
        return

    if transport not in TRANSPORTS:
        sys.stderr.write(f"mcp-gitingest: unknown MCP_TRANSPORT {transport!r}; expected one of {', '.join(TRANSPORTS)}\n")
        sys.exit(2)

    # Configure settings BEFORE run()
    mcp.settings.host = settings.host
    mcp.settings.port = settings.port

    if transport == "streamable-http":
        mcp.settings.streamable_http_path = settings.mount_path
    elif transport == "sse":
        mcp.settings.sse_path = settings.sse_path

    # Optional: stateless JSON mode for quick curl/browser tests
    if settings.stateless_json:
        mcp.settings.stateless_http = True
        mcp.settings.json_response = True

    log.info(
        "server.start",
        extra={
            "transport": transport,
            "host": settings.host,
            "port": settings.port,
            "path": settings.mount_path if transport == "streamable-http"
                    else settings.sse_path if transport == "sse" else None,
        },
    )
    mcp.run(transport=transport)

if __name__ == "__main__":
    main()
