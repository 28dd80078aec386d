from datetime import date

from picker import DayView
from view_picker import build_year_lines, cell_text, outside_cursor_month, year_line_index


def test_year_lines_expand_one_year_into_month_rows() -> None:
    collapsed = build_year_lines(None)
    assert len(collapsed) == 101

    expanded = build_year_lines(2024)
    assert len(expanded) == 104
    idx = year_line_index(2024, 2024)
    assert idx == 2024 - 1950
    assert [line.months for line in expanded[idx + 1 : idx + 4]] == [
        (0, 1, 2, 3),
        (4, 5, 6, 7),
        (8, 9, 10, 11),
    ]


def test_year_line_index_accounts_for_expanded_rows() -> None:
    assert year_line_index(2030, 2024) == 2030 - 1950 + 3
    assert year_line_index(2000, 2024) == 2000 - 1950
    assert year_line_index(1900, None) is None


def test_cell_text_marks_focus_and_today() -> None:
    assert cell_text(DayView(day=date(2024, 3, 5)), focused=True) == "[ 5]"
    assert cell_text(DayView(day=date(2024, 3, 15), is_today=True), focused=False) == " 15*"
    assert cell_text(DayView(day=date(2024, 3, 15)), focused=False) == " 15 "


def test_outside_cursor_month() -> None:
    assert outside_cursor_month(date(2024, 4, 1), date(2024, 3, 31))
    assert not outside_cursor_month(date(2024, 3, 1), date(2024, 3, 31))
