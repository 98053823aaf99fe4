from __future__ import annotations

from typing import List

from ..context import AuditContext
from ..models import Finding
from ..rule import Rule
from ..text import contains_image_with_alt, descendants_by_tag, elements_by_tag, has_empty_text


class DOM_ANCHORS_HAVE_TEXT(Rule):
    tag = "A11Y_DOM_04"
    message = "Links must have non-empty text content."
    reference = "WCAG 2.1 SC 2.4.4 Link Purpose (In Context)"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        return [
            Finding(anchor)
            for anchor in elements_by_tag(ctx.root, "a")
            if has_empty_text(anchor)
            and not contains_image_with_alt(anchor)
            and not descendants_by_tag(anchor, "svg")
        ]
