from common.audit_engine.dom import document, element, text
from common.audit_engine.rules import (
    DOM_ANCHORS_HAVE_TEXT,
    DOM_BUTTONS_HAVE_TEXT,
    DOM_CHOICES_GROUPED,
    DOM_COLOR_CONTRAST,
    DOM_FIELDSETS_HAVE_LEGEND,
    DOM_FRAMES_HAVE_TITLES,
    DOM_IMAGES_HAVE_ALT,
    DOM_INPUTS_HAVE_LABELS,
    DOM_ONCLICK_INTERACTIVE_ONLY,
    DOM_PAGE_HAS_TITLE,
    DOM_TABLE_HEADERS,
)


def _elements(findings):
    return [f.element for f in findings]


def test_images_need_meaningful_alt(make_ctx):
    missing = element("img")
    empty = element("img", attributes={"alt": ""})
    placeholder = element("img", attributes={"alt": " Image "})
    good = element("img", attributes={"alt": "Photo of cat"})
    root = element("div", missing, empty, placeholder, good)

    findings = DOM_IMAGES_HAVE_ALT().evaluate(make_ctx(root))
    assert _elements(findings) == [missing, empty, placeholder]


def test_image_placeholders_are_configurable(make_ctx):
    img = element("img", attributes={"alt": "spacer"})
    rules = {"A11Y_DOM_01": {"placeholder_values": ["spacer"]}}
    assert _elements(DOM_IMAGES_HAVE_ALT().evaluate(make_ctx(element("div", img), rules=rules))) == [img]


def test_inputs_and_labels(make_ctx):
    explicit = element("input", attributes={"id": "name", "type": "text"})
    implicit = element("input", attributes={"type": "email"})
    unlabeled = element("input", attributes={"type": "text"})
    empty_label_field = element("textarea", attributes={"id": "notes"})
    image_input = element("input", attributes={"type": "image"})
    hidden = element("input", attributes={"type": "hidden"})
    submit = element("input", attributes={"type": "submit"})
    orphan = element("label", text("Phone"), attributes={"for": "phone"})

    root = element(
        "form",
        element("label", text("Name"), attributes={"for": "name"}),
        explicit,
        element("label", text("Email "), implicit),
        unlabeled,
        element("label", text("   "), attributes={"for": "notes"}),
        empty_label_field,
        image_input,
        hidden,
        submit,
        orphan,
    )

    findings = DOM_INPUTS_HAVE_LABELS().evaluate(make_ctx(root))
    assert _elements(findings) == [unlabeled, empty_label_field, image_input, orphan]


def test_image_input_with_alt_passes(make_ctx):
    root = element("form", element("input", attributes={"type": "image", "alt": "Search"}))
    assert DOM_INPUTS_HAVE_LABELS().evaluate(make_ctx(root)) == []


def test_buttons_need_accessible_name(make_ctx):
    empty = element("button")
    aria = element("button", attributes={"aria-label": "Close"})
    icon = element("button", element("img", attributes={"alt": "Search"}))
    labelled = element("button", text("Save"))
    duplicated = element("button", element("span", text("Go")), element("span", text("Go")))
    distinct = element("button", element("span", text("Go")), element("span", text("Now")))
    root = element("div", empty, aria, icon, labelled, duplicated, distinct)

    assert _elements(DOM_BUTTONS_HAVE_TEXT().evaluate(make_ctx(root))) == [empty, duplicated]


def test_anchors_need_text_or_graphic(make_ctx):
    empty = element("a", attributes={"href": "/"})
    textual = element("a", text("Home"))
    image = element("a", element("img", attributes={"alt": "Home"}))
    image_without_alt = element("a", element("img"))
    svg = element("a", element("svg"))
    root = element("nav", empty, textual, image, image_without_alt, svg)

    assert _elements(DOM_ANCHORS_HAVE_TEXT().evaluate(make_ctx(root))) == [empty, image_without_alt]


def test_color_contrast_rule(make_ctx, make_style, make_page):
    good = element("p", text("Readable"), style=make_style())
    bad = element("p", text("Faint"), style=make_style(color="rgb(119, 119, 119)"))
    clipped = element("p", text("Clipped"), style=make_style(color="rgb(119, 119, 119)", overflow="hidden"))
    hidden = element(
        "div",
        element("p", text("Muted"), style=make_style(color="rgb(119, 119, 119)")),
        attributes={"aria-hidden": "true"},
        style=make_style(),
    )
    hidden_text = element(
        "span",
        text("Screen reader only"),
        attributes={"class": "assistiveText"},
        style=make_style(color="rgb(119, 119, 119)"),
    )
    root = make_page(good, bad, clipped, hidden, hidden_text)

    findings = DOM_COLOR_CONTRAST().evaluate(make_ctx(root))
    assert _elements(findings) == [bad]
    assert findings[0].values["expected_ratio"] == 4.5


def test_color_contrast_reports_parent_once(make_ctx, make_style, make_page):
    bad = element("p", text("one"), element("br"), text("two"), style=make_style(color="#777"))
    findings = DOM_COLOR_CONTRAST().evaluate(make_ctx(make_page(bad)))
    assert _elements(findings) == [bad]


def test_frames_need_titles(make_ctx):
    missing = element("iframe")
    blank = element("iframe", attributes={"title": "  "})
    titled = element("iframe", attributes={"title": "Map"})
    frame = element("frame")
    root = element("div", missing, blank, titled, frame)
    assert _elements(DOM_FRAMES_HAVE_TITLES().evaluate(make_ctx(root))) == [missing, blank, frame]


def test_page_title(make_ctx, make_page):
    assert DOM_PAGE_HAS_TITLE().evaluate(make_ctx(make_page())) == []

    empty_title_page = make_page(title="  ")
    head = empty_title_page.children[0].children[0]
    assert _elements(DOM_PAGE_HAS_TITLE().evaluate(make_ctx(empty_title_page))) == [head]

    no_title = element("head")
    root = document(element("html", no_title, element("body")))
    assert _elements(DOM_PAGE_HAS_TITLE().evaluate(make_ctx(root))) == [no_title]

    assert DOM_PAGE_HAS_TITLE().evaluate(make_ctx(element("div"))) == []


def test_table_rule_wraps_validator(make_ctx):
    bad = element("th", text("Age"), attributes={"scope": "banana"})
    table = element("table", element("tr", bad), element("tr", element("td", text("1"))))
    assert _elements(DOM_TABLE_HEADERS().evaluate(make_ctx(element("div", table)))) == [bad]


def test_fieldsets_need_legend(make_ctx):
    no_legend = element("fieldset", element("input"))
    empty_legend = element("fieldset", element("legend", text(" ")))
    good = element("fieldset", element("legend", text("Shipping")))
    not_displayed = element("fieldset", inline_style={"display": "none"})
    root = element("form", no_legend, empty_legend, good, not_displayed)

    assert _elements(DOM_FIELDSETS_HAVE_LEGEND().evaluate(make_ctx(root))) == [no_legend, empty_legend]


def _choice(kind: str, name: str | None):
    attributes = {"type": kind}
    if name is not None:
        attributes["name"] = name
    return element("input", attributes=attributes)


def test_grouped_choices_outside_fieldset_are_flagged(make_ctx):
    first, second = _choice("radio", "group1"), _choice("radio", "group1")
    root = element("body", element("form", first, second))
    assert _elements(DOM_CHOICES_GROUPED().evaluate(make_ctx(root))) == [first, second]


def test_grouped_choices_inside_fieldset_pass(make_ctx):
    first, second = _choice("radio", "group1"), _choice("radio", "group1")
    root = element("body", element("form", element("fieldset", element("legend", text("Pick")), first, second)))
    assert DOM_CHOICES_GROUPED().evaluate(make_ctx(root)) == []


def test_single_or_unnamed_choices_pass(make_ctx):
    root = element(
        "body",
        _choice("checkbox", "terms"),
        _choice("radio", None),
        _choice("radio", None),
        element("input"),
    )
    assert DOM_CHOICES_GROUPED().evaluate(make_ctx(root)) == []


def test_grouped_choices_report_in_document_order(make_ctx):
    a1, b1, a2, b2 = _choice("checkbox", "a"), _choice("radio", "b"), _choice("CHECKBOX", "a"), _choice("radio", "b")
    root = element("body", a1, b1, a2, b2)
    assert _elements(DOM_CHOICES_GROUPED().evaluate(make_ctx(root))) == [a1, b1, a2, b2]


def test_onclick_only_on_interactive_elements(make_ctx):
    div = element("div", attributes={"onclick": "go()"})
    span = element("span", attributes={"onclick": "go()"})
    button = element("button", attributes={"onclick": "go()"})
    anchor = element("a", attributes={"onclick": "go()"})
    canvas = element("canvas", attributes={"onclick": "draw()"})
    root = element("section", div, span, button, anchor, canvas)

    assert _elements(DOM_ONCLICK_INTERACTIVE_ONLY().evaluate(make_ctx(root))) == [div, span]
