from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Type, TypeVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .contrast import LARGE_BOLD_TEXT_PX, LARGE_TEXT_MIN_RATIO, LARGE_TEXT_PX, NORMAL_TEXT_MIN_RATIO
from .text import HIDDEN_TEXT_CLASS

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    enabled: bool = True


class ImageAltRuleConfig(RuleConfigBase):
    # Compared after lower-casing and removing all whitespace.
    placeholder_values: List[str] = Field(default_factory=lambda: ["", "undefined", "null", "empty", "image"])


class LabelRuleConfig(RuleConfigBase):
    ignored_input_types: List[str] = Field(default_factory=lambda: ["hidden", "button", "submit", "reset"])


class ContrastRuleConfig(RuleConfigBase):
    normal_min_ratio: float = NORMAL_TEXT_MIN_RATIO
    large_min_ratio: float = LARGE_TEXT_MIN_RATIO
    # Large text is >= large_text_px at normal weight or >= large_bold_text_px when bold.
    large_text_px: int = LARGE_TEXT_PX
    large_bold_text_px: int = LARGE_BOLD_TEXT_PX
    hidden_text_class: str = HIDDEN_TEXT_CLASS


class OnClickRuleConfig(RuleConfigBase):
    allowed_tags: List[str] = Field(default_factory=lambda: ["a", "button", "input", "canvas"])


class AuditConfig(BaseModel):
    """Per-rule configuration keyed by rule tag.

    Rules pull their typed config via `get_rule_config`.
    """

    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        tag: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if tag not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(tag, {})
        return model.model_validate(raw)

    @classmethod
    def from_file(cls, path: Path) -> "AuditConfig":
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            import yaml

            payload = yaml.safe_load(text) or {}
        else:
            payload = json.loads(text)
        return cls.model_validate(payload)


@dataclass(frozen=True)
class AuditSettings:
    selected_tags: FrozenSet[str] = field(default_factory=frozenset)
    excluded_tags: FrozenSet[str] = field(default_factory=frozenset)
    log_level: str = "INFO"
    config_path: Optional[Path] = None


def get_audit_settings() -> AuditSettings:
    """
    Load audit defaults from the environment (and a local .env file).

    Reads A11Y_RULES, A11Y_SKIP_RULES, A11Y_LOG_LEVEL and A11Y_CONFIG_PATH.
    """
    load_dotenv()
    config_path = os.getenv("A11Y_CONFIG_PATH", "").strip()
    return AuditSettings(
        selected_tags=_split_tags(os.getenv("A11Y_RULES", "")),
        excluded_tags=_split_tags(os.getenv("A11Y_SKIP_RULES", "")),
        log_level=os.getenv("A11Y_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        config_path=Path(config_path) if config_path else None,
    )


def _split_tags(raw: str) -> FrozenSet[str]:
    return frozenset(part.strip() for part in raw.split(",") if part.strip())

