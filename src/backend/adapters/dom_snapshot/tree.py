from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Tuple

from common.audit_engine.dom import ComputedStyle, DomNode, NodeKind


class DomSnapshotAdapterError(ValueError):
    pass


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_STYLE_FIELDS = set(ComputedStyle.model_fields)


def _style_key(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()


def _style_from_payload(raw: Any) -> ComputedStyle | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DomSnapshotAdapterError("Node style must be a JSON object.")
    values: Dict[str, str] = {}
    for name, value in raw.items():
        key = _style_key(str(name))
        if key in _STYLE_FIELDS and value is not None:
            values[key] = str(value)
    return ComputedStyle(**values)


def _string_map(raw: Any, what: str) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DomSnapshotAdapterError(f"Node {what} must be a JSON object.")
    return {str(k): str(v) for k, v in raw.items() if v is not None}


def _node_from_payload(raw: Any) -> Tuple[DomNode, List[Any]]:
    if isinstance(raw, str):
        return DomNode(kind=NodeKind.TEXT, value=raw), []
    if not isinstance(raw, dict):
        raise DomSnapshotAdapterError("Snapshot nodes must be JSON objects or strings.")

    if "text" in raw and "tag" not in raw:
        return DomNode(kind=NodeKind.TEXT, value=str(raw["text"] or "")), []

    kind_raw = str(raw.get("kind") or NodeKind.ELEMENT.value).lower()
    try:
        kind = NodeKind(kind_raw)
    except ValueError as exc:
        raise DomSnapshotAdapterError(f"Unknown node kind: {kind_raw!r}") from exc
    if kind == NodeKind.TEXT:
        return DomNode(kind=kind, value=str(raw.get("value") or "")), []

    tag = raw.get("tag") or ("#document" if kind == NodeKind.DOCUMENT else "")
    if not isinstance(tag, str) or not tag.strip():
        raise DomSnapshotAdapterError("Element nodes require a non-empty 'tag'.")

    children = raw.get("children") or []
    if not isinstance(children, list):
        raise DomSnapshotAdapterError(f"Children of <{tag}> must be a list.")

    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        raise DomSnapshotAdapterError("Node properties must be a JSON object.")

    node = DomNode(
        kind=kind,
        tag=tag.strip(),
        attributes=_string_map(raw.get("attributes"), "attributes"),
        properties=dict(properties),
        style=_style_from_payload(raw.get("style")),
        inline_style=_string_map(raw.get("inline_style"), "inline_style"),
        rendered_text=raw.get("rendered_text"),
        stylesheet_text=raw.get("stylesheet_text"),
    )
    return node, children


def tree_from_payload(payload: Any) -> DomNode:
    """
    Build a DomNode tree from a DOM snapshot payload.

    Supported shapes:
    - {"document": { ...node... }}
    - { ...node... }  with "tag", "attributes", "style", "children", ...
    - text nodes as plain strings, {"text": "..."} or {"kind": "text", "value": "..."}

    Style keys may be snake_case, kebab-case or camelCase.
    """
    if isinstance(payload, dict) and isinstance(payload.get("document"), dict):
        payload = payload["document"]
    if not isinstance(payload, dict):
        raise DomSnapshotAdapterError("Snapshot payload must be a JSON object.")

    root, pending = _node_from_payload(payload)
    stack = [(root, pending)]
    while stack:
        parent, raw_children = stack.pop()
        for raw_child in raw_children:
            child, grandchildren = _node_from_payload(raw_child)
            parent.append(child)
            if grandchildren:
                stack.append((child, grandchildren))
    return root


def load_snapshot(path: Path) -> DomNode:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        import yaml

        payload = yaml.safe_load(text)
    else:
        payload = json.loads(text)
    return tree_from_payload(payload)
