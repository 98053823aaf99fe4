from __future__ import annotations

from typing import List

from ..context import AuditContext
from ..models import Finding
from ..rule import Rule
from ..tables import validate_tables


class DOM_TABLE_HEADERS(Rule):
    tag = "A11Y_DOM_08"
    message = "Data table cells must be associated with data table headers."
    reference = "WCAG 2.1 SC 1.3.1 Info and Relationships"

    def evaluate(self, ctx: AuditContext) -> List[Finding]:
        return [Finding(cell, {"cell": cell.tag}) for cell in validate_tables(ctx.root)]
