from __future__ import annotations

import contextlib
import logging

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Mount, Route

from .. import __version__
from ..server import mcp
from ..settings import Settings
from ..tools import TOOLS
from ..utils.logging import setup_logging

logger = logging.getLogger("mcp.gitingest.app")

# FastMCP keeps its own streamable_http_path ("/mcp"); mounting at "/" leaves the URL exactly "/mcp"
mcp_app = mcp.streamable_http_app()

async def health(_request):
    return JSONResponse(
        {
            "status": "ok",
            "name": "mcp-gitingest",
            "version": __version__,
            "transport": "streamable-http",
            "endpoint": mcp.settings.streamable_http_path,
            "tools": list(TOOLS),
        },
        status_code=200,
    )

async def root(_request):
    return PlainTextResponse(
        f"mcp-gitingest {__version__}\ntransport: streamable-http at {mcp.settings.streamable_http_path}"
    )

# Lifespan: start/stop the MCP session manager so POST /mcp works
@contextlib.asynccontextmanager
async def lifespan(_app: Starlette):
    async with contextlib.AsyncExitStack() as stack:
        await stack.enter_async_context(mcp.session_manager.run())
        yield

routes = [
    # explicit routes first; the catch-all mount would shadow them
    Route("/health", endpoint=health, methods=["GET"]),
    Route("/", endpoint=root, methods=["GET"]),
    Mount("/", app=mcp_app),
]

app = Starlette(routes=routes, lifespan=lifespan)


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger.info("server.start", extra={"transport": "streamable-http", "host": settings.host, "port": settings.port})
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


# Optional local run: `python -m mcp_gitingest.transports.app`
if __name__ == "__main__":
    main()
