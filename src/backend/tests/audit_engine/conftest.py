import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.audit_engine.config import AuditConfig
from common.audit_engine.context import AuditContext
from common.audit_engine.dom import ComputedStyle, DomNode, document, element, text


@pytest.fixture
def make_style():
    def _make(**overrides) -> ComputedStyle:
        values = {
            "font_size": "16px",
            "font_weight": "normal",
            "font_family": "Arial",
            "color": "rgb(0, 0, 0)",
            "background_color": "rgba(0, 0, 0, 0)",
            "background_image": "none",
            "visibility": "visible",
            "display": "block",
            "opacity": "1",
            "overflow": "visible",
        }
        values.update(overrides)
        return ComputedStyle(**values)

    return _make


@pytest.fixture
def make_page(make_style):
    """Document > html > (head with title, white body holding `content`)."""

    def _make(*content: DomNode, title: str = "Page", body_style: ComputedStyle | None = None) -> DomNode:
        head = element("head", element("title", text(title)))
        body = element(
            "body",
            *content,
            style=body_style or make_style(background_color="rgb(255, 255, 255)"),
        )
        return document(element("html", head, body, style=make_style()))

    return _make


@pytest.fixture
def make_ctx():
    def _make(root: DomNode, *, rules: dict | None = None) -> AuditContext:
        return AuditContext(root=root, config=AuditConfig(rules=rules or {}))

    return _make
