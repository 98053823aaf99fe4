from __future__ import annotations

from typing import List

from ..config import OnClickRuleConfig
from ..context import AuditContext
from ..models import Finding
from ..rule import Rule
from ..text import elements_by_tag


class DOM_ONCLICK_INTERACTIVE_ONLY(Rule):
    tag = "A11Y_DOM_11"
    message = "Non-interactive DOM elements should not have onclick events."
    reference = "WCAG 2.1 SC 2.1.1 Keyboard"
    config_model = OnClickRuleConfig

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        allowed = {value.lower() for value in self.config(ctx).allowed_tags}
        return [
            Finding(node)
            for node in elements_by_tag(ctx.root, "*")
            if node.has_attribute("onclick") and node.tag not in allowed
        ]
