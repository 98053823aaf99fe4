from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel


class NodeKind(str, Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"


class ComputedStyle(BaseModel):
    """Resolved visual style for one element, as a browser would report it."""

    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    font_family: Optional[str] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    background_image: Optional[str] = None
    visibility: Optional[str] = None
    display: Optional[str] = None
    opacity: Optional[str] = None
    overflow: Optional[str] = None


class DomNode:
    """
    Read-only handle into a rendered document snapshot.

    Nodes compare and hash by identity. `attributes` keys are lower-case;
    `properties` holds DOM properties that have no attribute counterpart.
    """

    def __init__(
        self,
        kind: NodeKind = NodeKind.ELEMENT,
        tag: str = "",
        *,
        attributes: Optional[Dict[str, str]] = None,
        properties: Optional[Dict[str, Any]] = None,
        style: Optional[ComputedStyle] = None,
        inline_style: Optional[Dict[str, str]] = None,
        value: Optional[str] = None,
        rendered_text: Optional[str] = None,
        stylesheet_text: Optional[str] = None,
        children: Optional[List["DomNode"]] = None,
    ):
        self.kind = kind
        self.tag = (tag or "").lower()
        self.attributes: Dict[str, str] = {k.lower(): v for k, v in (attributes or {}).items()}
        self.properties: Dict[str, Any] = dict(properties or {})
        self.style = style
        self.inline_style: Dict[str, str] = dict(inline_style or {})
        self.value = value
        self.rendered_text = rendered_text
        self.stylesheet_text = stylesheet_text
        self.parent: Optional[DomNode] = None
        self.children: List[DomNode] = []
        for child in children or []:
            self.append(child)

    def __repr__(self) -> str:
        if self.is_text:
            return f"DomNode(text={self.value!r})"
        return f"DomNode(<{self.tag}> attributes={self.attributes!r})"

    @property
    def is_element(self) -> bool:
        return self.kind == NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind == NodeKind.TEXT

    def append(self, child: "DomNode") -> "DomNode":
        child.parent = self
        self.children.append(child)
        return child

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name.lower())

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self.attributes

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name.lower()] = value

    @property
    def text_content(self) -> str:
        if self.is_text:
            return self.value or ""
        return "".join(node.value or "" for node in self.iter_descendants() if node.is_text)

    def iter_descendants(self) -> Iterator["DomNode"]:
        """Yield descendants in document (pre-)order, excluding self."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def element(tag: str, *children: DomNode, **kwargs: Any) -> DomNode:
    return DomNode(kind=NodeKind.ELEMENT, tag=tag, children=list(children), **kwargs)


def text(value: str) -> DomNode:
    return DomNode(kind=NodeKind.TEXT, value=value)


def document(*children: DomNode) -> DomNode:
    return DomNode(kind=NodeKind.DOCUMENT, tag="#document", children=list(children))
