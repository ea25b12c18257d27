from __future__ import annotations

import logging
from typing import Any, Dict, Protocol, runtime_checkable

from gitingest import ingest_async

from .models.options import IngestOptions, IngestResult

log = logging.getLogger("mcp.gitingest.ingestor")


@runtime_checkable
class Ingestor(Protocol):
    """Fetches a repository and renders it as (summary, tree, content)."""

    async def ingest(self, source: str, options: IngestOptions) -> IngestResult:
        ...


def gitingest_kwargs(options: IngestOptions) -> Dict[str, Any]:
    """
    Translate options into gitingest keyword arguments.
    gitingest takes pattern sets, so list order is not kept past this point.
    """
    kwargs = options.to_kwargs()
    for key in ("include_patterns", "exclude_patterns"):
        if key in kwargs:
            kwargs[key] = set(kwargs[key])
    return kwargs


class GitIngestIngestor:
    """Ingestor backed by gitingest.ingest_async."""

    async def ingest(self, source: str, options: IngestOptions) -> IngestResult:
        kwargs = gitingest_kwargs(options)
        log.debug("gitingest.call", extra={"source": source, "options": options.as_dict()})
        summary, tree, content = await ingest_async(source, **kwargs)
        return IngestResult(summary=summary, tree=tree, content=content)
