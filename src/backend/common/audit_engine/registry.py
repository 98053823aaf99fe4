from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .rule import Rule


class RuleRegistry:
    """Immutable, ordered catalog of rules keyed by tag."""

    def __init__(self, rules: Iterable[Rule]):
        ordered: dict[str, Rule] = {}
        for rule in rules:
            tag = getattr(rule, "tag", None)
            if not tag:
                raise ValueError("Rule missing tag")
            if tag in ordered:
                raise ValueError(f"Duplicate rule tag registered: {tag}")
            ordered[tag] = rule
        self._rules: Mapping[str, Rule] = MappingProxyType(ordered)

    def __contains__(self, tag: object) -> bool:
        return tag in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def get(self, tag: str) -> Rule:
        return self._rules[tag]

    def tags(self) -> Tuple[str, ...]:
        return tuple(self._rules.keys())

    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules.values())

    def messages(self) -> Mapping[str, str]:
        return MappingProxyType({tag: rule.message for tag, rule in self._rules.items()})


@lru_cache(maxsize=1)
def default_registry() -> RuleRegistry:
    from .rules import BUILTIN_RULES

    return RuleRegistry(rule_cls() for rule_cls in BUILTIN_RULES)
