from __future__ import annotations

import re
from collections.abc import Mapping, Sized
from typing import Any, List, Optional

from .dom import DomNode, NodeKind

_WHITESPACE = re.compile(r"\s+")

HIDDEN_TEXT_CLASS = "assistiveText"


def is_empty_value(value: Any) -> bool:
    """
    True for None, "", empty collections and objects without own attributes.

    Whitespace-only strings are NOT empty here; use `has_empty_text` for text.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (Mapping, Sized)):
        return len(value) == 0
    if hasattr(value, "__dict__"):
        return not vars(value)
    return False


def trim(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


def strip_whitespace(value: str) -> str:
    return _WHITESPACE.sub("", value)


def text_content(node: Optional[DomNode]) -> Optional[str]:
    """
    Text of a node: rendered text first, then raw text content, then the
    stylesheet text of a <style> element.
    """
    if node is None:
        return None
    if node.is_text:
        return node.value

    value = trim(node.rendered_text)
    if is_empty_value(value):
        value = node.text_content
    if node.tag == "style" and is_empty_value(trim(value)) and node.stylesheet_text is not None:
        value = node.stylesheet_text
    return value


def has_empty_text(node: Optional[DomNode]) -> Optional[bool]:
    if node is None:
        return None
    return (trim(text_content(node)) or "") == ""


def attribute(node: Optional[DomNode], name: Optional[str]) -> Optional[str]:
    """Attribute lookup: get_attribute(), then the attributes mapping, then properties."""
    if node is None or name is None:
        return None

    getter = getattr(node, "get_attribute", None)
    value = getter(name) if callable(getter) else None
    if value is not None:
        return value

    attributes = getattr(node, "attributes", None)
    if isinstance(attributes, Mapping) and attributes.get(name) is not None:
        return attributes[name]

    properties = getattr(node, "properties", None)
    if isinstance(properties, Mapping) and properties.get(name) is not None:
        return properties[name]
    return None


def nearest_ancestor_with_tag(node: Optional[DomNode], tag: Optional[str]) -> Optional[DomNode]:
    """
    Closest node (starting with `node` itself) whose tag matches, stopping
    before <body> or the document.
    """
    if node is None or tag is None:
        return None

    wanted = tag.lower()
    current = node
    while current is not None and current.is_element and current.tag != "body":
        if current.tag == wanted:
            return current
        current = current.parent
    return None


def elements_by_tag(root: Optional[DomNode], tag: Optional[str]) -> List[DomNode]:
    """
    Elements with `tag` under `root` in document order.

    A root that matches itself is returned alone. "*" selects every
    descendant element.
    """
    if root is None or tag is None:
        return []

    wanted = tag.lower()
    if root.is_element and root.tag == wanted:
        return [root]
    return [
        node
        for node in root.iter_descendants()
        if node.is_element and (wanted == "*" or node.tag == wanted)
    ]


def descendants_by_tag(root: DomNode, tag: str) -> List[DomNode]:
    wanted = tag.lower()
    return [node for node in root.iter_descendants() if node.is_element and node.tag == wanted]


def contains_image_with_alt(node: Optional[DomNode]) -> Optional[bool]:
    if node is None:
        return None
    for image in descendants_by_tag(node, "img"):
        if not is_empty_value(trim(attribute(image, "alt"))):
            return True
    return False


def is_visible(node: Optional[DomNode], hidden_class: str = HIDDEN_TEXT_CLASS) -> bool:
    """
    Whether the node and every ancestor up to <html> is rendered.

    Elements carrying `hidden_class` are positioned off screen for screen
    readers and count as not visible.
    """
    current = node
    while current is not None and current.kind == NodeKind.ELEMENT:
        if hidden_class and hidden_class in (attribute(current, "class") or ""):
            return False

        style = current.style
        if style is None:
            return False
        if style.visibility == "hidden" or style.display == "none" or style.opacity == "0":
            return False

        parent = current.parent
        if parent is None or parent.tag == "html" or not parent.is_element:
            return True
        current = parent
    return False
