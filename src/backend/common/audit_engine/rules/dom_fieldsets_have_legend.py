from __future__ import annotations

from typing import List

from ..context import AuditContext
from ..dom import DomNode
from ..models import Finding
from ..rule import Rule
from ..text import descendants_by_tag, elements_by_tag, has_empty_text


def _is_displayed(fieldset: DomNode) -> bool:
    if fieldset.inline_style.get("display") == "none":
        return False
    return fieldset.style is None or fieldset.style.display != "none"


class DOM_FIELDSETS_HAVE_LEGEND(Rule):
    tag = "A11Y_DOM_09"
    message = "Fieldset must have a legend element."
    reference = "WCAG 2.1 SC 1.3.1 Info and Relationships"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        findings: List[Finding] = []
        for fieldset in elements_by_tag(ctx.root, "fieldset"):
            if not _is_displayed(fieldset):
                continue
            legends = descendants_by_tag(fieldset, "legend")
            if not legends:
                findings.append(Finding(fieldset, {"reason": "missing legend"}))
            elif any(has_empty_text(legend) for legend in legends):
                findings.append(Finding(fieldset, {"reason": "empty legend"}))
        return findings
