from __future__ import annotations

from typing import Dict, List

from ..config import LabelRuleConfig
from ..context import AuditContext
from ..dom import DomNode
from ..models import Finding
from ..rule import Rule
from ..text import (
    attribute,
    descendants_by_tag,
    has_empty_text,
    is_empty_value,
    nearest_ancestor_with_tag,
    strip_whitespace,
)

FORM_FIELD_TAGS = ("input", "select", "textarea")


def explicit_labels(labels: List[DomNode]) -> Dict[str, DomNode]:
    """Map each `for` target id to the label pointing at it (last label wins)."""
    by_field: Dict[str, DomNode] = {}
    for label in labels:
        field_id = attribute(label, "for")
        if not is_empty_value(field_id):
            by_field[field_id] = label
    return by_field


class DOM_INPUTS_HAVE_LABELS(Rule):
    """
    Every form field needs exactly one non-empty label and every label must
    belong to a field. ARIA labelling is not taken into account.
    """

    tag = "A11Y_DOM_02"
    message = "There must be a one-to-one relationship between labels and inputs."
    reference = "WCAG 2.1 SC 1.3.1 Info and Relationships, SC 3.3.2 Labels or Instructions"
    config_model = LabelRuleConfig

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        cfg = self.config(ctx)
        ignored_types = {value.lower() for value in cfg.ignored_input_types}

        fields = [
            node
            for node in ctx.root.iter_descendants()
            if node.is_element and node.tag in FORM_FIELD_TAGS
        ]
        labels = descendants_by_tag(ctx.root, "label")
        by_field = explicit_labels(labels)

        findings: List[Finding] = []
        used: set[int] = set()
        for field in fields:
            field_type = (attribute(field, "type") or "").lower()
            if field_type in ignored_types:
                continue

            if field_type == "image":
                alt = attribute(field, "alt")
                if is_empty_value(alt) or strip_whitespace(alt) == "":
                    findings.append(Finding(field, {"reason": "image input without alt"}))
                continue

            field_id = attribute(field, "id")
            if not is_empty_value(field_id) and field_id in by_field:
                label = by_field[field_id]
                used.add(id(label))
                if has_empty_text(label):
                    findings.append(Finding(field, {"reason": "empty explicit label"}))
                continue

            ancestor = nearest_ancestor_with_tag(field, "label")
            if ancestor is None:
                findings.append(Finding(field, {"reason": "no label"}))
                continue
            used.add(id(ancestor))
            if has_empty_text(ancestor):
                findings.append(Finding(field, {"reason": "empty implicit label"}))

        for label in labels:
            if id(label) not in used:
                findings.append(Finding(label, {"reason": "label not associated with a field"}))
        return findings
