from __future__ import annotations

from typing import Sequence

from .models import AuditResult

ERROR_ATTRIBUTE = "data-a11y-error"
ERROR_BORDER = "3px solid #da0000"


def annotate(results: Sequence[AuditResult]) -> None:
    """Mark failing elements with their rule tag and a red outline.

    Safe to repeat. The audit never reads these marks back.
    """
    for result in results:
        for element in result.failing_elements:
            element.set_attribute(ERROR_ATTRIBUTE, result.tag)
            element.inline_style["border"] = ERROR_BORDER
