from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .dom import DomNode


@dataclass(frozen=True, eq=False)
class Finding:
    element: DomNode
    values: Dict[str, Any] = field(default_factory=dict)


class FailureDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    message: str
    values: Dict[str, Any] = Field(default_factory=dict)


class AuditResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag: str
    message: str
    reference: str = ""

    failing_elements: List[DomNode] = Field(default_factory=list)
    details: List[FailureDetail] = Field(default_factory=list)


class RuleEvaluationError(RuntimeError):
    def __init__(self, tag: str, message: str = ""):
        self.tag = tag
        super().__init__(message or f"Rule {tag} raised during evaluation")
