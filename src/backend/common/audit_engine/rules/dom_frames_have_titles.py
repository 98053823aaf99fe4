from __future__ import annotations

from typing import List

from ..context import AuditContext
from ..models import Finding
from ..rule import Rule
from ..text import attribute, trim

FRAME_TAGS = ("frame", "iframe")


class DOM_FRAMES_HAVE_TITLES(Rule):
    tag = "A11Y_DOM_06"
    message = "All frames and iframes need non-empty titles."
    reference = "WCAG 2.1 SC 4.1.2 Name, Role, Value"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        root = ctx.root
        if root.is_element and root.tag in FRAME_TAGS:
            frames = [root]
        else:
            frames = [node for node in root.iter_descendants() if node.is_element and node.tag in FRAME_TAGS]
        return [Finding(frame) for frame in frames if (trim(attribute(frame, "title")) or "") == ""]
