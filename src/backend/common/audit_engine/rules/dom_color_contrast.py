from __future__ import annotations

from typing import List

from common.logging import get_logger

from ..config import ContrastRuleConfig
from ..context import AuditContext
from ..contrast import check_contrast
from ..dom import DomNode
from ..models import Finding
from ..rule import Rule
from ..text import attribute, has_empty_text, is_visible

logger = get_logger(__name__)

NON_TEXT_PARENTS = ("script", "style")


def text_bearing_elements(root: DomNode, hidden_text_class: str) -> List[DomNode]:
    """
    Visible parents of non-blank text nodes in document order, each once.

    Subtrees marked aria-hidden="true" are not read out and are skipped.
    """
    found: List[DomNode] = []
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_element and attribute(node, "aria-hidden") == "true":
            continue
        if node.is_text:
            parent = node.parent
            if (
                parent is not None
                and parent.is_element
                and id(parent) not in seen
                and not has_empty_text(node)
                and parent.tag not in NON_TEXT_PARENTS
                and is_visible(parent, hidden_text_class)
            ):
                seen.add(id(parent))
                found.append(parent)
            continue
        stack.extend(reversed(node.children))
    return found


class DOM_COLOR_CONTRAST(Rule):
    tag = "A11Y_DOM_05"
    message = "Text nodes must have color contrast of 4.5:1 for regular text or 3:1 for large text."
    reference = "WCAG 2.1 SC 1.4.3 Contrast (Minimum)"
    config_model = ContrastRuleConfig

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        cfg = self.config(ctx)
        findings: List[Finding] = []
        for node in text_bearing_elements(ctx.root, cfg.hidden_text_class):
            result = check_contrast(
                node,
                normal_min_ratio=cfg.normal_min_ratio,
                large_min_ratio=cfg.large_min_ratio,
                large_text_px=cfg.large_text_px,
                large_bold_text_px=cfg.large_bold_text_px,
            )
            if result is None:
                continue
            # Clipped content is not readable either way.
            if node.style is not None and node.style.overflow == "hidden":
                continue

            values = result.model_dump()
            logger.debug("contrast_failure", tag=node.tag, **values)
            findings.append(Finding(node, values))
        return findings
