from __future__ import annotations

from typing import List

from ..context import AuditContext
from ..models import Finding
from ..rule import Rule
from ..text import descendants_by_tag, has_empty_text


class DOM_PAGE_HAS_TITLE(Rule):
    tag = "A11Y_DOM_07"
    message = "The head section must have a non-empty title element."
    reference = "WCAG 2.1 SC 2.4.2 Page Titled"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        heads = descendants_by_tag(ctx.root, "head")
        if not heads:
            return []

        head = heads[0]
        titles = descendants_by_tag(head, "title")
        if not titles or has_empty_text(titles[0]):
            return [Finding(head)]
        return []
