"""Build a DomNode tree from static HTML markup.

There is no layout engine here: computed styles are approximated by
cascading inline `style` declarations over user-agent defaults, with the
inherited text properties flowing from parent to child. Stylesheets are
not applied.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from common.audit_engine.dom import ComputedStyle, DomNode, NodeKind

from .colors import normalize_colors

INHERITED_DEFAULTS: Dict[str, str] = {
    "color": "rgb(0, 0, 0)",
    "font-size": "16px",
    "font-weight": "normal",
    "font-family": "serif",
    "visibility": "visible",
}
RESET_DEFAULTS: Dict[str, str] = {
    "background-color": "rgba(0, 0, 0, 0)",
    "background-image": "none",
    "opacity": "1",
    "overflow": "visible",
}

NOT_RENDERED_TAGS = frozenset({"head", "title", "meta", "link", "script", "style", "template", "noscript"})
BLOCK_TAGS = frozenset(
    {
        "html", "body", "div", "p", "section", "article", "header", "footer", "main", "nav", "aside",
        "form", "fieldset", "legend", "ul", "ol", "li", "table", "h1", "h2", "h3", "h4", "h5", "h6",
    }
)
TAG_DEFAULTS: Dict[str, Dict[str, str]] = {
    "b": {"font-weight": "bold"},
    "strong": {"font-weight": "bold"},
    "th": {"font-weight": "bold"},
    "h1": {"font-size": "32px", "font-weight": "bold"},
    "h2": {"font-size": "24px", "font-weight": "bold"},
    "h3": {"font-size": "19px", "font-weight": "bold"},
    "h4": {"font-size": "16px", "font-weight": "bold"},
    "h5": {"font-size": "13px", "font-weight": "bold"},
    "h6": {"font-size": "11px", "font-weight": "bold"},
}

_LENGTH = re.compile(r"^\s*(\d*\.?\d+)\s*(px|em|rem|%|pt)?\s*$", re.IGNORECASE)


def parse_inline_style(value: Optional[str]) -> Dict[str, str]:
    declarations: Dict[str, str] = {}
    for chunk in (value or "").split(";"):
        name, sep, raw = chunk.partition(":")
        if not sep or not name.strip():
            continue
        declarations[name.strip().lower()] = raw.replace("!important", "").strip()
    return declarations


def _font_size(declared: str, parent_px: float) -> str:
    match = _LENGTH.match(declared)
    if not match:
        return declared
    number, unit = float(match.group(1)), (match.group(2) or "px").lower()
    px = {
        "px": number,
        "em": number * parent_px,
        "rem": number * 16,
        "%": number * parent_px / 100,
        "pt": number * 4 / 3,
    }[unit]
    return f"{px:g}px"


def _px(value: str) -> float:
    match = _LENGTH.match(value)
    return float(match.group(1)) if match else 16.0


def _cascade(tag: str, attrs: Dict[str, str], inherited: Dict[str, str]) -> Tuple[Dict[str, str], Dict[str, str]]:
    declared = dict(TAG_DEFAULTS.get(tag, {}))
    declared.update(parse_inline_style(attrs.get("style")))

    background = declared.pop("background", None)
    if background:
        if "url(" in background:
            declared.setdefault("background-image", background)
        else:
            declared.setdefault("background-color", background)

    computed = dict(inherited)
    computed.update(RESET_DEFAULTS)
    computed["display"] = "none" if tag in NOT_RENDERED_TAGS else ("block" if tag in BLOCK_TAGS else "inline")
    if "hidden" in attrs:
        computed["display"] = "none"

    for name, value in declared.items():
        if name == "font-size":
            value = _font_size(value, _px(inherited["font-size"]))
        computed[name] = value
    normalize_colors(computed)

    return computed, {name: computed[name] for name in INHERITED_DEFAULTS}


def _style(computed: Dict[str, str]) -> ComputedStyle:
    return ComputedStyle(
        font_size=computed.get("font-size"),
        font_weight=computed.get("font-weight"),
        font_family=computed.get("font-family"),
        color=computed.get("color"),
        background_color=computed.get("background-color"),
        background_image=computed.get("background-image"),
        visibility=computed.get("visibility"),
        display=computed.get("display"),
        opacity=computed.get("opacity"),
        overflow=computed.get("overflow"),
    )


def _attributes(tag: Tag) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    for name, value in tag.attrs.items():
        attrs[name.lower()] = " ".join(value) if isinstance(value, list) else str(value)
    return attrs


def tree_from_html(markup: str) -> DomNode:
    """Parse markup into a document node whose children mirror the HTML tree."""
    soup = BeautifulSoup(markup, "html.parser")
    document = DomNode(kind=NodeKind.DOCUMENT, tag="#document")

    stack: List[Tuple[Tag, DomNode, Dict[str, str]]] = [(soup, document, dict(INHERITED_DEFAULTS))]
    while stack:
        source, parent, inherited = stack.pop()
        pending: List[Tuple[Tag, DomNode, Dict[str, str]]] = []
        for child in source.children:
            if isinstance(child, Tag):
                attrs = _attributes(child)
                tag = child.name.lower()
                computed, passed_down = _cascade(tag, attrs, inherited)
                node = parent.append(
                    DomNode(
                        kind=NodeKind.ELEMENT,
                        tag=tag,
                        attributes=attrs,
                        style=_style(computed),
                        inline_style=parse_inline_style(attrs.get("style")),
                        stylesheet_text=child.get_text() if tag == "style" else None,
                    )
                )
                pending.append((child, node, passed_down))
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                parent.append(DomNode(kind=NodeKind.TEXT, value=str(child)))
        stack.extend(reversed(pending))
    return document


def load_html(path: Path) -> DomNode:
    return tree_from_html(path.read_text(encoding="utf-8"))
