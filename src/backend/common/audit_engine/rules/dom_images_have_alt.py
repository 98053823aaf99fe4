from __future__ import annotations

from typing import List

from ..config import ImageAltRuleConfig
from ..context import AuditContext
from ..models import Finding
from ..rule import Rule
from ..text import attribute, elements_by_tag, strip_whitespace


class DOM_IMAGES_HAVE_ALT(Rule):
    tag = "A11Y_DOM_01"
    message = "All image tags require the presence of the alt attribute."
    reference = "WCAG 2.1 SC 1.1.1 Non-text Content"
    config_model = ImageAltRuleConfig

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        cfg = self.config(ctx)
        placeholders = {strip_whitespace(value.lower()) for value in cfg.placeholder_values}

        findings: List[Finding] = []
        for image in elements_by_tag(ctx.root, "img"):
            alt = attribute(image, "alt")
            if alt is not None and strip_whitespace(alt.lower()) not in placeholders:
                continue
            findings.append(Finding(image, {"alt": alt}))
        return findings
