import io

import pytest

from tidyviewer.table import TableConfig, display_table, render_table

EXAMPLE = [
    ["a", "b"],
    ["1", "b"],
    ["4.1453", "c"],
    ["2.4", "f"],
    ["5", "e"],
]


def plain(**kwargs):
    options = {"is_tty": False, "term_tuple": (80, 24)}
    options.update(kwargs)
    return TableConfig(**options)


def test_example_plain_output():
    expected = (
        "a    a  \n"
        "1    b  \n"
        "4.15 c  \n"
        "2.40 f  \n"
        "5    e  \n"
    ).replace("a    a  ", "a    b  ")
    assert render_table(EXAMPLE, plain()) == expected


def test_every_row_is_printed_when_extended():
    lines = render_table(EXAMPLE, plain()).splitlines()
    assert len(lines) == len(EXAMPLE)
    assert len({len(line) for line in lines}) == 1


def test_truncated_rows_mention_remainder():
    text = render_table(EXAMPLE, plain(extend_option=False, row_display_option=2))
    lines = text.split("\n")
    assert lines[0].startswith("a")
    assert len([line for line in lines if line.strip()]) == 4
    assert "\u2026 with 2 more rows" in text
    assert "more variables" not in text


def test_narrow_terminal_lists_hidden_columns():
    text = render_table(
        EXAMPLE,
        plain(extend_option=False, row_display_option=1, term_tuple=(12, 24)),
    )
    assert "b" not in text.split("\n")[0]
    assert text.endswith("and 1 more variables: b")


def test_hidden_columns_are_comma_separated():
    rows = [["alpha", "beta", "gamma"], ["1", "2", "3"], ["4", "5", "6"]]
    text = render_table(
        rows, plain(extend_option=False, row_display_option=1, term_tuple=(13, 24))
    )
    assert text.endswith(" and 2 more variables: beta, gamma")


def test_no_escape_codes_without_tty():
    assert "\x1b[" not in render_table(EXAMPLE, plain(display_meta=True, title_option="T"))


def test_forced_color_uses_header_color():
    text = render_table(EXAMPLE, plain(is_force_color=True))
    assert "\x1b[1m\x1b[38;2;94;129;172ma    \x1b[39m\x1b[0m" in text


def test_negative_and_missing_cells_are_colored():
    rows = [["x"], ["-5"], ["NA"], ["7"]]
    text = render_table(rows, plain(is_force_color=True))
    assert "\x1b[38;2;208;135;112m-5 \x1b[39m" in text
    assert "\x1b[38;2;191;97;106mNA \x1b[39m" in text
    assert "\x1b[38;2;216;222;233m7  \x1b[39m" in text


def test_line_counter_prefixes_rows():
    lines = render_table(EXAMPLE, plain(line_counter=True)).splitlines()
    assert lines[0].startswith(" " * 6 + "a")
    for number, line in enumerate(lines[1:], start=1):
        assert line.startswith(f"{number:<6}")


def test_meta_line_shows_dimensions():
    first = render_table(EXAMPLE, plain(display_meta=True)).splitlines()[0]
    assert first == " " * 6 + f"tv dim: {len(EXAMPLE) - 1} x 2"


def test_title_and_footer():
    lines = render_table(
        EXAMPLE, plain(title_option="Title", footer_option="Footer")
    ).splitlines()
    assert lines[0] == " " * 6 + "Title"
    assert lines[-1] == " " * 6 + "Footer"


def test_missing_value_in_cell_becomes_na():
    rows = [["x", "y"], ["null", "1"], ["3", "2"]]
    lines = render_table(rows, plain()).splitlines()
    assert lines[1].startswith("NA")


def test_empty_table_is_rejected():
    with pytest.raises(ValueError):
        render_table([], plain())


def test_short_row_is_rejected():
    with pytest.raises(ValueError):
        render_table([["a", "b"], ["1"]], plain())


def test_display_writes_rendered_text():
    config = plain(line_counter=True)
    buffer = io.StringIO()
    display_table(EXAMPLE, config, buffer)
    assert buffer.getvalue() == render_table(EXAMPLE, config)


def test_display_ignores_broken_pipe():
    class Closed(io.StringIO):
        def write(self, text):
            raise BrokenPipeError

    stream = Closed()
    display_table(EXAMPLE, plain(), stream)
    assert stream.getvalue() == ""


def test_debug_mode_reports_column_types():
    text = render_table(EXAMPLE, plain(debug_mode=True))
    assert '"vec_datatypes"\n[Character, Character]\n' in text
    assert text.endswith(render_table(EXAMPLE, plain()))