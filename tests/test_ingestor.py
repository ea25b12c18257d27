"""Tests for the gitingest-backed ingestor."""

from __future__ import annotations

import asyncio

import pytest

from mcp_gitingest import ingestor as ingestor_mod
from mcp_gitingest.ingestor import GitIngestIngestor, Ingestor, gitingest_kwargs
from mcp_gitingest.models.options import IngestOptions, IngestResult


class TestGitingestKwargs:
    def test_empty_options(self) -> None:
        assert gitingest_kwargs(IngestOptions()) == {}

    def test_patterns_become_sets(self) -> None:
        kwargs = gitingest_kwargs(
            IngestOptions(include_patterns=["*.py", "*.md"], exclude_patterns=["dist/*"], max_file_size=10)
        )
        assert kwargs == {
            "include_patterns": {"*.py", "*.md"},
            "exclude_patterns": {"dist/*"},
            "max_file_size": 10,
        }

    def test_options_untouched(self) -> None:
        options = IngestOptions(include_patterns=["*.py"])
        gitingest_kwargs(options)
        assert options.include_patterns == ["*.py"]


class TestGitIngestIngestor:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(GitIngestIngestor(), Ingestor)

    def test_calls_ingest_async(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        async def fake_ingest_async(source, **kwargs):
            calls.append((source, kwargs))
            return "summary", "tree", "content"

        monkeypatch.setattr(ingestor_mod, "ingest_async", fake_ingest_async)

        result = asyncio.run(
            GitIngestIngestor().ingest("https://github.com/user/repo", IngestOptions(max_file_size=1))
        )

        assert result == IngestResult("summary", "tree", "content")
        assert calls == [("https://github.com/user/repo", {"max_file_size": 1})]

    def test_propagates_errors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def failing(source, **kwargs):
            raise ValueError("Invalid GitHub URL")

        monkeypatch.setattr(ingestor_mod, "ingest_async", failing)

        with pytest.raises(ValueError, match="Invalid GitHub URL"):
            asyncio.run(GitIngestIngestor().ingest("nope", IngestOptions()))
