from __future__ import annotations

import os
from dataclasses import dataclass

TRANSPORTS = ("stdio", "sse", "streamable-http")


def _truthy(v: str | None) -> bool:
    return str(v or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass
class Settings:
    # Transport
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 8000
    mount_path: str = "/mcp"
    sse_path: str = "/sse"
    stateless_json: bool = False

    # Logging
    log_level: str = "INFO"
    verbose_outputs: bool = False
    service_name: str = "mcp.gitingest"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            transport=os.getenv("MCP_TRANSPORT", "stdio").strip().lower(),
            host=os.getenv("MCP_HOST", "0.0.0.0"),
            port=_int_env("MCP_PORT", 8000),
            mount_path=os.getenv("MCP_MOUNT_PATH", "/mcp"),
            sse_path=os.getenv("MCP_SSE_PATH", "/sse"),
            stateless_json=_truthy(os.getenv("MCP_STATELESS_JSON")),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            verbose_outputs=_truthy(os.getenv("LOG_VERBOSE_OUTPUTS")),
            service_name=os.getenv("SERVICE_NAME", "mcp.gitingest").strip() or "mcp.gitingest",
        )
