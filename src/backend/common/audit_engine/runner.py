from __future__ import annotations

import uuid
from typing import AbstractSet, List, Optional

from common.logging import get_logger

from .annotate import annotate
from .config import AuditConfig
from .context import AuditContext
from .dom import DomNode
from .models import AuditResult, RuleEvaluationError
from .registry import RuleRegistry, default_registry
from .results import format_output

logger = get_logger(__name__)


class AuditRunner:
    def __init__(self, registry: Optional[RuleRegistry] = None, config: Optional[AuditConfig] = None):
        self._registry = registry if registry is not None else default_registry()
        self._config = config or AuditConfig()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def select(
        self,
        selected_tags: Optional[AbstractSet[str]] = None,
        excluded_tags: Optional[AbstractSet[str]] = None,
    ) -> List[str]:
        """Tags to run, in catalog order. Exclusion wins; unknown tags are dropped."""
        requested = set(selected_tags or ()) or set(self._registry.tags())
        requested -= set(excluded_tags or ())

        unknown = sorted(tag for tag in requested if tag not in self._registry)
        if unknown:
            logger.warning("unknown_rule_tags", tags=unknown)
        return [tag for tag in self._registry.tags() if tag in requested]

    def run(
        self,
        root: DomNode,
        *,
        selected_tags: Optional[AbstractSet[str]] = None,
        excluded_tags: Optional[AbstractSet[str]] = None,
        highlight: bool = False,
    ) -> List[AuditResult]:
        log = logger.bind(audit_id=str(uuid.uuid4()))
        ctx = AuditContext(root=root, config=self._config)
        tags = self.select(selected_tags, excluded_tags)
        log.debug("audit_started", tags=tags)

        results: List[AuditResult] = []
        for tag in tags:
            rule = self._registry.get(tag)
            try:
                if not rule.config(ctx).enabled:
                    log.debug("rule_skipped_disabled", tag=tag)
                    continue
                findings = rule.evaluate(ctx)
            except Exception as exc:
                raise RuleEvaluationError(tag, f"Rule {tag} failed: {exc}") from exc

            result = format_output(rule, findings)
            log.debug("rule_evaluated", tag=tag, failures=len(result.failing_elements) if result else 0)
            if result is not None:
                results.append(result)

        if highlight:
            annotate(results)
        log.info("audit_completed", rules_run=len(tags), rules_failed=[r.tag for r in results])
        return results


def audit(
    root: DomNode,
    selected_tags: Optional[AbstractSet[str]] = None,
    excluded_tags: Optional[AbstractSet[str]] = None,
    *,
    highlight: bool = False,
    config: Optional[AuditConfig] = None,
    registry: Optional[RuleRegistry] = None,
) -> List[AuditResult]:
    return AuditRunner(registry=registry, config=config).run(
        root,
        selected_tags=selected_tags,
        excluded_tags=excluded_tags,
        highlight=highlight,
    )
