from __future__ import annotations

from dataclasses import dataclass, field
from typing import Type, TypeVar

from pydantic import BaseModel

from .config import AuditConfig
from .dom import DomNode

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class AuditContext:
    root: DomNode
    config: AuditConfig = field(default_factory=AuditConfig)

    def rule_config(self, tag: str, model: Type[T]) -> T:
        return self.config.get_rule_config(tag, model)
