from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .dom import DomNode
from .models import AuditResult, FailureDetail, Finding
from .rule import Rule


def describe_node(node: DomNode) -> str:
    """
    CSS-like locator for a node, e.g. `html > body > div#main > img:nth-of-type(2)`.

    An element with an id ends the walk upward since the id already anchors it.
    """
    parts: List[str] = []
    current: Optional[DomNode] = node
    while current is not None and current.is_element:
        element_id = current.get_attribute("id")
        if element_id:
            parts.append(f"{current.tag}#{element_id}")
            break

        part = current.tag
        parent = current.parent
        if parent is not None:
            same_tag = [child for child in parent.children if child.is_element and child.tag == current.tag]
            if len(same_tag) > 1:
                part = f"{part}:nth-of-type({same_tag.index(current) + 1})"
        parts.append(part)
        current = parent
    return " > ".join(reversed(parts))


def format_output(rule: Rule, findings: Iterable[Finding]) -> Optional[AuditResult]:
    """Collapse a rule's findings into one result; None when nothing failed."""
    seen: set[int] = set()
    elements: List[DomNode] = []
    details: List[FailureDetail] = []
    for finding in findings:
        if id(finding.element) in seen:
            continue
        seen.add(id(finding.element))
        elements.append(finding.element)
        details.append(
            FailureDetail(
                key=describe_node(finding.element),
                message=rule.message,
                values=dict(finding.values),
            )
        )

    if not elements:
        return None
    return AuditResult(
        tag=rule.tag,
        message=rule.message,
        reference=rule.reference,
        failing_elements=elements,
        details=details,
    )


def results_payload(results: Sequence[AuditResult]) -> List[Dict[str, Any]]:
    return [
        {
            "tag": result.tag,
            "message": result.message,
            "reference": result.reference,
            "elements": [detail.key for detail in result.details],
            "details": [detail.model_dump() for detail in result.details],
        }
        for result in results
    ]
