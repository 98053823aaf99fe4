from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Type

from pydantic import BaseModel

from .config import RuleConfigBase
from .context import AuditContext
from .models import Finding


class Rule(ABC):
    tag: str
    message: str
    reference: str = ""
    config_model: Type[BaseModel] = RuleConfigBase

    def __init__(self):
        if not getattr(self, "tag", None):
            raise ValueError("Rule must define tag")

    def config(self, ctx: AuditContext):
        return ctx.rule_config(self.tag, self.config_model)

    @abstractmethod
    def evaluate(self, ctx: AuditContext) -> List[Finding]:  # pragma: no cover
        raise NotImplementedError
