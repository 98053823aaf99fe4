from __future__ import annotations

from typing import List

from ..context import AuditContext
from ..dom import DomNode
from ..models import Finding
from ..rule import Rule
from ..text import (
    attribute,
    contains_image_with_alt,
    elements_by_tag,
    has_empty_text,
    is_empty_value,
    text_content,
    trim,
)


def _content_key(node: DomNode) -> str:
    if node.tag == "img":
        return attribute(node, "alt") or ""
    return trim(text_content(node)) or ""


def has_duplicate_sibling_content(button: DomNode) -> bool:
    """True when two sibling elements inside the button carry the same content."""
    stack = [button]
    while stack:
        parent = stack.pop()
        seen: set[str] = set()
        for child in parent.children:
            if not child.is_element:
                continue
            key = _content_key(child)
            if key in seen:
                return True
            seen.add(key)
            stack.append(child)
    return False


class DOM_BUTTONS_HAVE_TEXT(Rule):
    tag = "A11Y_DOM_03"
    message = "Buttons must have non-empty text labels."
    reference = "WCAG 2.1 SC 4.1.2 Name, Role, Value"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        findings: List[Finding] = []
        for button in elements_by_tag(ctx.root, "button"):
            if has_empty_text(button):
                if not is_empty_value(trim(attribute(button, "aria-label"))):
                    continue
                if contains_image_with_alt(button):
                    continue
                findings.append(Finding(button, {"reason": "no accessible name"}))
                continue

            if has_duplicate_sibling_content(button):
                findings.append(Finding(button, {"reason": "duplicate content"}))
        return findings
