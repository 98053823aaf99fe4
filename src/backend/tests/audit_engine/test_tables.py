from common.audit_engine.dom import element, text
from common.audit_engine.tables import validate_table, validate_tables


def _th(label: str, **attributes):
    return element("th", text(label), attributes=attributes)


def _td(value: str, **attributes):
    return element("td", text(value), attributes=attributes)


def _table(headers, rows):
    return element(
        "table",
        element("tr", *headers),
        *[element("tr", *cells) for cells in rows],
    )


def test_all_headers_scoped_passes():
    table = _table([_th("Name", scope="col"), _th("Age", scope="col")], [[_td("Ann"), _td("31")]])
    assert validate_table(table) == []


def test_invalid_scope_flags_only_that_header():
    bad = _th("Age", scope="banana")
    table = _table([_th("Name", scope="col"), bad], [[_td("Ann"), _td("31")]])
    assert validate_table(table) == [bad]


def test_scope_is_compared_case_insensitively():
    table = _table([_th("Name", scope=" COL ")], [[_td("Ann")]])
    assert validate_table(table) == []


def test_whitespace_scope_is_invalid():
    bad = _th("Name", scope="  ")
    assert validate_table(_table([bad], [[_td("Ann")]])) == [bad]


def test_header_without_scope_or_id_fails():
    bare = _th("Age")
    table = _table([_th("Name", scope="col"), bare], [[_td("Ann"), _td("31")]])
    assert validate_table(table) == [bare]


def test_any_scoped_header_skips_cell_checks():
    table = _table([_th("Name", scope="col"), _th("Age", id="age")], [[_td("Ann"), _td("31")]])
    assert validate_table(table) == []


def test_headers_cross_reference_passes():
    table = _table(
        [_th("Name", id="name"), _th("Age", id="age")],
        [[_td("Ann", headers="name"), _td("31", headers="name  age")]],
    )
    assert validate_table(table) == []


def test_cell_without_headers_fails():
    missing = _td("31")
    table = _table([_th("Name", id="name"), _th("Age", id="age")], [[_td("Ann", headers="name"), missing]])
    assert validate_table(table) == [missing]


def test_cell_referencing_unknown_header_fails():
    unknown = _td("31", headers="name nope")
    table = _table([_th("Name", id="name")], [[_td("Ann", headers="name"), unknown]])
    assert validate_table(table) == [unknown]


def test_tables_without_headers_or_cells_are_skipped():
    assert validate_table(_table([], [[_td("Ann")]])) == []
    assert validate_table(_table([_th("Name", id="name")], [])) == []


def test_failures_follow_table_order():
    first_bad = _th("A", scope="diagonal")
    second_bad = _td("x")
    first = _table([first_bad], [[_td("1")]])
    second = _table([_th("B", id="b")], [[second_bad]])
    root = element("div", first, element("section", second))
    assert validate_tables(root) == [first_bad, second_bad]


def test_root_table_is_validated():
    bad = _th("A")
    table = _table([bad], [[_td("1")]])
    assert validate_tables(table) == [bad]
