from __future__ import annotations

from typing import Dict, List

from ..context import AuditContext
from ..dom import DomNode
from ..models import Finding
from ..rule import Rule
from ..text import attribute, elements_by_tag, is_empty_value, nearest_ancestor_with_tag

GROUPED_INPUT_TYPES = ("radio", "checkbox")


class DOM_CHOICES_GROUPED(Rule):
    """Radio buttons and checkboxes sharing a name form a group that needs a fieldset."""

    tag = "A11Y_DOM_10"
    message = "Radio buttons and checkboxes should be grouped within fieldsets."
    reference = "WCAG 2.1 SC 1.3.1 Info and Relationships"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        inputs = [
            node
            for node in elements_by_tag(ctx.root, "input")
            if (attribute(node, "type") or "").lower() in GROUPED_INPUT_TYPES
        ]

        groups: Dict[str, List[DomNode]] = {}
        for node in inputs:
            name = attribute(node, "name")
            if is_empty_value(name):
                continue
            groups.setdefault(name, []).append(node)

        flagged: set[int] = set()
        for members in groups.values():
            if len(members) < 2:
                continue
            for node in members:
                if nearest_ancestor_with_tag(node, "fieldset") is None:
                    flagged.add(id(node))

        return [
            Finding(node, {"name": attribute(node, "name")})
            for node in inputs
            if id(node) in flagged
        ]
