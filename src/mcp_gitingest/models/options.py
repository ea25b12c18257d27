from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict


class IngestOptions(BaseModel):
    """
    One complete option set per call. A field left as None is absent: it is
    not sent to the ingestion engine at all, so the engine's own default applies.
    """

    model_config = ConfigDict(frozen=True)

    include_patterns: Optional[List[str]] = None
    exclude_patterns: Optional[List[str]] = None
    max_file_size: Optional[int] = None

    def to_kwargs(self) -> Dict[str, Any]:
        return {k: v for k, v in self if v is not None}

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class IngestResult(NamedTuple):
    summary: str
    tree: str
    content: str
