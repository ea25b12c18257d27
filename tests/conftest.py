from __future__ import annotations

import pytest

from mcp_gitingest.models.options import IngestOptions, IngestResult
from mcp_gitingest.tools import set_ingestor


class FakeIngestor:
    """Records every call; returns a fixed triple or raises `error`."""

    def __init__(
        self,
        result: tuple[str, str, str] = ("Repository: user/repo", "└── README.md", "hello"),
        error: BaseException | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, IngestOptions]] = []

    async def ingest(self, source: str, options: IngestOptions) -> IngestResult:
        self.calls.append((source, options))
        if self.error is not None:
            raise self.error
        return IngestResult(*self.result)


@pytest.fixture
def fake_ingestor():
    fake = FakeIngestor()
    previous = set_ingestor(fake)
    yield fake
    set_ingestor(previous)


