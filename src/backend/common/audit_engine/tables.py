"""Header/data cell association for data tables (WCAG 2.x 1.3.1).

A table conforms in one of two mutually exclusive ways:

1. every <th> declares a valid `scope`, or
2. every <th> carries an `id` and every <td> lists known ids in `headers`.

Any <th> declaring `scope` commits the table to the first strategy.
"""

from __future__ import annotations

from typing import Dict, List

from .dom import DomNode
from .text import attribute, descendants_by_tag, elements_by_tag, is_empty_value, trim

VALID_SCOPES = frozenset({"row", "col", "rowgroup", "colgroup"})

HeaderIndex = Dict[str, bool]


def _check_headers(headers: List[DomNode], index: HeaderIndex) -> tuple[List[DomNode], bool]:
    failures: List[DomNode] = []
    scoped = False
    for header in headers:
        scope = attribute(header, "scope")
        header_id = attribute(header, "id")
        if not is_empty_value(scope):
            if (trim(scope) or "").lower() not in VALID_SCOPES:
                failures.append(header)
            scoped = True
        elif not is_empty_value(header_id):
            index[header_id] = True
        else:
            failures.append(header)
    return failures, scoped


def _check_cells(cells: List[DomNode], index: HeaderIndex) -> List[DomNode]:
    failures: List[DomNode] = []
    for cell in cells:
        refs = attribute(cell, "headers")
        if is_empty_value(refs):
            failures.append(cell)
            continue
        if any(ref not in index for ref in (trim(refs) or "").split()):
            failures.append(cell)
    return failures


def validate_table(table: DomNode) -> List[DomNode]:
    headers = descendants_by_tag(table, "th")
    if not headers:
        return []

    index: HeaderIndex = {}
    failures, scoped = _check_headers(headers, index)
    if failures or scoped:
        return failures

    cells = descendants_by_tag(table, "td")
    if not cells:
        return []
    return _check_cells(cells, index)


def validate_tables(root: DomNode) -> List[DomNode]:
    failures: List[DomNode] = []
    for table in elements_by_tag(root, "table"):
        failures.extend(validate_table(table))
    return failures
