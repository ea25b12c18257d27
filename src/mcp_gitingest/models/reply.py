from __future__ import annotations

import json
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field


class SuccessReply(BaseModel):
    status: Literal["success"] = "success"
    payload: Dict[str, Any] = Field(default_factory=dict)


class FailureReply(BaseModel):
    status: Literal["failure"] = "failure"
    error_kind: str = Field(min_length=1)
    message: str = Field(min_length=1)
    context: Dict[str, Any] = Field(default_factory=dict)


Reply = Union[SuccessReply, FailureReply]


def render(reply: Reply) -> str:
    """Serialize a reply as the single pretty-printed JSON text block sent to the caller."""
    return json.dumps(reply.model_dump(mode="json"), indent=2, ensure_ascii=False, default=str)
