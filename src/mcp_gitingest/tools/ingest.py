from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, NamedTuple, Optional, Type

from pydantic import BaseModel, ValidationError

from ..errors import INVALID_ARGUMENTS, error_message, failure_context, validation_message
from ..ingestor import GitIngestIngestor, Ingestor
from ..models.options import IngestOptions, IngestResult
from ..models.params import (
    AnalyzeCodeParams,
    ExcludePatterns,
    IncludePatterns,
    IngestRepoParams,
    LanguageArg,
    MaxFileSize,
    RepoDocsParams,
    RepoStructureParams,
    RepoUrl,
)
from ..models.reply import FailureReply, SuccessReply, render
from ..patterns import (
    CODE_EXCLUDE_PATTERNS,
    CODE_MAX_FILE_SIZE,
    DOCS_INCLUDE_PATTERNS,
    DOCS_MAX_FILE_SIZE,
    STRUCTURE_MAX_FILE_SIZE,
    Language,
    patterns_for,
)
from ..settings import Settings
from ..utils.logging import preview

log = logging.getLogger("mcp.gitingest.tools.ingest")
settings = Settings.from_env()

_ingestor: Ingestor = GitIngestIngestor()


def get_ingestor() -> Ingestor:
    return _ingestor


def set_ingestor(ingestor: Ingestor) -> Ingestor:
    """Swap the ingestion backend; returns the previous one."""
    global _ingestor
    previous, _ingestor = _ingestor, ingestor
    return previous


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def run_ingest(
    tool: str,
    repo_url: str,
    options: IngestOptions,
    *,
    error_kind: str,
    build_payload: Callable[[IngestResult], Dict[str, Any]],
    context: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Shared body of every tool: call the ingestor once with a complete option
    set and render exactly one reply. Nothing raised by the ingestor escapes.
    """
    context = {"repo_url": repo_url, **(context or {})}
    t0 = time.time()
    log.info("tool.request", extra={"tool": tool, "repo_url": repo_url, "options": options.as_dict()})
    try:
        result = IngestResult(*await get_ingestor().ingest(repo_url, options))
    except Exception as e:
        message = error_message(e)
        log.exception("tool.error", extra={"tool": tool, "repo_url": repo_url, "error": message})
        return render(FailureReply(error_kind=error_kind, message=message, context=context))

    payload = build_payload(result)
    extra: Dict[str, Any] = {
        "tool": tool,
        "repo_url": repo_url,
        "took_ms": int((time.time() - t0) * 1000),
        "content_chars": len(result.content or ""),
    }
    if settings.verbose_outputs:
        extra["summary_preview"] = preview(result.summary)
    log.info("tool.response", extra=extra)
    return render(SuccessReply(payload=payload))


async def ingest_github_repo(
    repo_url: RepoUrl,
    include_patterns: IncludePatterns = None,
    exclude_patterns: ExcludePatterns = None,
    max_file_size: MaxFileSize = None,
) -> str:
    """Fetches and formats a GitHub repository for LLM consumption. Returns structured content including summary, file tree, and full file contents."""
    options = IngestOptions(
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        max_file_size=max_file_size,
    )

    def payload(result: IngestResult) -> Dict[str, Any]:
        return {
            "summary": result.summary,
            "tree": result.tree,
            "content": result.content,
            "metadata": {
                "repo_url": repo_url,
                "timestamp": _now_iso(),
                "options_used": options.as_dict(),
            },
        }

    return await run_ingest(
        "ingest_github_repo", repo_url, options,
        error_kind="Failed to ingest repository",
        build_payload=payload,
    )


async def get_repo_structure(
    repo_url: RepoUrl,
) -> str:
    """Gets just the directory tree structure of a GitHub repository without file contents"""
    options = IngestOptions(max_file_size=STRUCTURE_MAX_FILE_SIZE)

    def payload(result: IngestResult) -> Dict[str, Any]:
        # content is fetched (size-capped) but never returned
        return {"summary": result.summary, "tree": result.tree, "repo_url": repo_url}

    return await run_ingest(
        "get_repo_structure", repo_url, options,
        error_kind="Failed to get repository structure",
        build_payload=payload,
    )


async def analyze_code_files(
    repo_url: RepoUrl,
    language: LanguageArg,
) -> str:
    """Analyzes specific types of code files in a repository"""
    lang = Language(language)
    patterns = patterns_for(lang)
    options = IngestOptions(
        include_patterns=patterns,
        exclude_patterns=list(CODE_EXCLUDE_PATTERNS),
        max_file_size=CODE_MAX_FILE_SIZE,
    )

    def payload(result: IngestResult) -> Dict[str, Any]:
        return {
            "summary": result.summary,
            "tree": result.tree,
            "content": result.content,
            "analysis": {
                "language": lang.value,
                "patterns_used": patterns,
                "repo_url": repo_url,
            },
        }

    return await run_ingest(
        "analyze_code_files", repo_url, options,
        error_kind="Failed to analyze code files",
        build_payload=payload,
        context={"language": lang.value},
    )


async def get_repo_docs(
    repo_url: RepoUrl,
) -> str:
    """Retrieves only documentation files from a repository (README, markdown files, etc.)"""
    options = IngestOptions(
        include_patterns=list(DOCS_INCLUDE_PATTERNS),
        max_file_size=DOCS_MAX_FILE_SIZE,
    )

    def payload(result: IngestResult) -> Dict[str, Any]:
        return {
            "summary": result.summary,
            "tree": result.tree,
            "content": result.content,
            "metadata": {"type": "documentation", "repo_url": repo_url},
        }

    return await run_ingest(
        "get_repo_docs", repo_url, options,
        error_kind="Failed to get repository documentation",
        build_payload=payload,
    )


class ToolSpec(NamedTuple):
    handler: Callable[..., Awaitable[str]]
    params: Type[BaseModel]
    title: str


TOOLS: Dict[str, ToolSpec] = {
    "ingest_github_repo": ToolSpec(ingest_github_repo, IngestRepoParams, "Ingest GitHub Repository"),
    "get_repo_structure": ToolSpec(get_repo_structure, RepoStructureParams, "Get Repository Structure"),
    "analyze_code_files": ToolSpec(analyze_code_files, AnalyzeCodeParams, "Analyze Code Files"),
    "get_repo_docs": ToolSpec(get_repo_docs, RepoDocsParams, "Get Repository Docs"),
}


async def dispatch(name: str, arguments: Dict[str, Any] | None) -> str:
    """
    Validate raw arguments against the tool's params model, then run it.
    Schema violations come back as a failure reply; the ingestor is never called.
    """
    spec = TOOLS[name]
    try:
        params = spec.params.model_validate(arguments or {})
    except ValidationError as e:
        message = validation_message(e)
        log.warning("tool.invalid", extra={"tool": name, "error": message})
        return render(
            FailureReply(
                error_kind=INVALID_ARGUMENTS,
                message=message,
                context=failure_context(arguments),
            )
        )
    return await spec.handler(**dict(params))
