import pytest

from adapters.markup import parse_inline_style, tree_from_html
from adapters.markup.colors import keyword_to_rgb
from common.audit_engine import audit
from common.audit_engine.dom import NodeKind
from common.audit_engine.text import elements_by_tag


PAGE = """<!DOCTYPE html>
<html>
  <head><title>Checkout</title><style>p { color: red }</style></head>
  <body style="background: #fff">
    <!-- banner -->
    <h1>Checkout</h1>
    <p id="note" style="color: #777">Prices include tax.</p>
    <p style="font-size: 1.5em; color: #777">Big print</p>
    <img src="cart.png">
    <div hidden><p style="color: #777">Hidden</p></div>
    <table>
      <tr><th scope="col">Item</th><th scope="banana">Qty</th></tr>
      <tr><td>Hat</td><td>1</td></tr>
    </table>
  </body>
</html>
"""


def test_parse_inline_style():
    assert parse_inline_style("color: #777; Font-Size:12px ;; bogus") == {"color": "#777", "font-size": "12px"}
    assert parse_inline_style("color: red !important") == {"color": "red"}
    assert parse_inline_style(None) == {}


def test_markup_tree_shape_and_styles():
    root = tree_from_html(PAGE)
    assert root.kind == NodeKind.DOCUMENT

    (head,) = elements_by_tag(root, "head")
    assert head.style.display == "none"
    (style,) = elements_by_tag(root, "style")
    assert style.stylesheet_text == "p { color: red }"

    (body,) = elements_by_tag(root, "body")
    assert body.style.background_color == "#fff"

    note, big, hidden = elements_by_tag(root, "p")
    assert note.style.color == "#777"
    assert note.style.font_size == "16px"
    assert big.style.font_size == "24px"
    assert hidden.parent.style.display == "none"

    (heading,) = elements_by_tag(root, "h1")
    assert heading.style.font_weight == "bold"
    assert not any(node.is_text and "banner" in (node.value or "") for node in root.iter_descendants())


def test_markup_audit():
    results = {r.tag: r for r in audit(tree_from_html(PAGE))}
    assert sorted(results) == ["A11Y_DOM_01", "A11Y_DOM_05", "A11Y_DOM_08"]
    assert [d.key for d in results["A11Y_DOM_05"].details] == ["p#note"]
    assert [e.get_attribute("scope") for e in results["A11Y_DOM_08"].failing_elements] == ["banana"]


@pytest.mark.parametrize("background", ["white", "WHITE", "#ffffff", "rgb(255, 255, 255)"])
def test_color_keywords_resolve_like_hex(background):
    page = f'<html><body style="background-color: {background}"><p style="color: #999">Faint</p></body></html>'
    results = audit(tree_from_html(page), {"A11Y_DOM_05"})
    assert [r.tag for r in results] == ["A11Y_DOM_05"]
    assert results[0].details[0].values["background"] == "#ffffff"


def test_color_keywords_become_rgb_and_inherit():
    root = tree_from_html('<div style="color: Gray; background: silver"><span>Muted</span></div>')
    (div,) = elements_by_tag(root, "div")
    (span,) = elements_by_tag(root, "span")
    assert div.style.color == "rgb(128, 128, 128)"
    assert div.style.background_color == "rgb(192, 192, 192)"
    assert span.style.color == "rgb(128, 128, 128)"
    assert span.style.background_color == "rgba(0, 0, 0, 0)"


def test_keyword_to_rgb_leaves_other_values():
    assert keyword_to_rgb("transparent") == "transparent"
    assert keyword_to_rgb("#abc") == "#abc"
    assert keyword_to_rgb(None) is None
    assert keyword_to_rgb(" rebeccapurple ") == "rgb(102, 51, 153)"
