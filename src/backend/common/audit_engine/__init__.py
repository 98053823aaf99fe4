"""Accessibility audit engine for rendered DOM snapshots.

This package intentionally contains only domain logic:
- Rule inputs are an in-memory element tree with resolved styles.
- No browser automation, HTML fetching or report rendering lives here.
"""

from .annotate import annotate
from .config import AuditConfig
from .context import AuditContext
from .dom import ComputedStyle, DomNode, NodeKind
from .models import AuditResult, FailureDetail, Finding, RuleEvaluationError
from .registry import RuleRegistry, default_registry
from .results import results_payload
from .runner import AuditRunner, audit
