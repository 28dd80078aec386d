from datetime import date, datetime

import pytest

from date_ranges import DateRange
from models import NoValue, RangeValue, SingleValue, ValidationError
from picker import DatePickerController
from scheduler import DeferredScheduler
from view_state import CLOSE_RESET_DELAY_MS, SCROLL_SETTLE_DELAY_MS

TODAY = date(2024, 3, 15)


class Recorder:
    def __init__(self) -> None:
        self.values: list = []
        self.modes: list = []
        self.opens: list = []
        self.scrolls: list = []
        self.resets = 0

    def on_reset(self) -> None:
        self.resets += 1


def _make_picker(
    scheduler: DeferredScheduler,
    recorder: Recorder,
    *,
    with_reset: bool = True,
    **kwargs,
) -> DatePickerController:
    return DatePickerController(
        on_value_change=recorder.values.append,
        on_mode_change=recorder.modes.append,
        on_open_change=recorder.opens.append,
        on_scroll_to_year=recorder.scrolls.append,
        on_reset=recorder.on_reset if with_reset else None,
        scheduler=scheduler,
        today=lambda: TODAY,
        **kwargs,
    )


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


def test_defaults_to_duo_single_with_today_cursor(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    assert picker.mode == "duo"
    assert picker.sub_mode == "single"
    assert picker.cursor == TODAY
    assert picker.view == "days"
    assert picker.value == NoValue()
    assert picker.display_text() == "Pick a date"
    assert picker.is_muted()


def test_single_select_commits_moves_cursor_and_closes(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, mode="single")
    picker.open()
    picker.select_day(date(2025, 7, 4))

    assert recorder.values == [SingleValue(date(2025, 7, 4))]
    assert picker.cursor == date(2025, 7, 4)
    assert not picker.is_open
    assert recorder.opens == [True, False]
    assert picker.display_text() == "July 4th, 2025"


def test_range_clicks_leave_cursor_alone(scheduler, recorder) -> None:
    # Scenario A through the controller
    picker = _make_picker(scheduler, recorder, mode="range")
    picker.open()
    picker.next_month()
    cursor = picker.cursor

    picker.select_day(date(2024, 3, 10))
    assert recorder.values == []
    assert picker.is_open
    assert picker.display_text() == "Mar 10, 2024 - ?"

    picker.select_day(date(2024, 3, 5))
    assert recorder.values == [RangeValue(DateRange(from_=date(2024, 3, 5), to=date(2024, 3, 10)))]
    assert picker.cursor == cursor
    assert not picker.is_open
    assert picker.display_text() == "Mar 5, 2024 - Mar 10, 2024"


def test_month_navigation_never_touches_selection(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, value=date(2024, 1, 31))
    picker.next_month()
    assert picker.cursor == date(2024, 2, 29)
    picker.previous_month()
    picker.previous_month()
    assert (picker.cursor.year, picker.cursor.month) == (2023, 12)
    assert picker.value == SingleValue(date(2024, 1, 31))
    assert recorder.values == []


def test_select_month_year_forces_days_view(scheduler, recorder) -> None:
    # Scenario C
    picker = _make_picker(scheduler, recorder)
    picker.toggle_view()
    assert picker.view == "years"

    picker.select_month_year(2030, 5)
    assert (picker.cursor.year, picker.cursor.month) == (2030, 6)
    assert picker.view == "days"
    assert picker.header_text() == "June 2030"

    picker.select_month_year(2031, 2)
    assert picker.view == "days"


def test_select_month_year_ignores_bad_month_index(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    picker.select_month_year(2030, 12)
    assert picker.cursor == TODAY


def test_reopen_before_reset_delay_keeps_years(clock, scheduler, recorder) -> None:
    # Scenario D
    picker = _make_picker(scheduler, recorder)
    picker.open()
    picker.toggle_view()
    picker.close()

    picker.tick(clock.advance(50))
    picker.open()
    picker.tick(clock.advance(CLOSE_RESET_DELAY_MS * 5))
    assert picker.view == "years"


def test_reopen_after_reset_delay_shows_days(clock, scheduler, recorder) -> None:
    # Scenario E
    picker = _make_picker(scheduler, recorder)
    picker.open()
    picker.toggle_view()
    picker.close()

    picker.tick(clock.advance(CLOSE_RESET_DELAY_MS + 1))
    picker.open()
    assert picker.view == "days"


def test_scroll_request_targets_cursor_year(clock, scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, value=date(2031, 8, 1))
    picker.open()
    picker.toggle_view()

    picker.tick(clock.advance(SCROLL_SETTLE_DELAY_MS))
    assert recorder.scrolls == [2031]


def test_out_of_window_year_has_no_highlight_or_scroll(clock, scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, value=date(1900, 1, 1))
    picker.open()
    picker.toggle_view()
    picker.tick(clock.advance(SCROLL_SETTLE_DELAY_MS))

    assert recorder.scrolls == []
    assert picker.current_year_index() is None
    assert not any(entry.is_current for entry in picker.year_entries())
    assert len(picker.year_entries()) == 101


def test_year_entries_mark_cursor_month(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    current = [entry for entry in picker.year_entries() if entry.is_current]
    assert len(current) == 1
    assert current[0].year == 2024
    assert current[0].current_month == 2
    assert picker.current_year_index() == 2024 - 1950


def test_duo_flip_scenario_b(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, value=date(2024, 1, 1))
    picker.next_month()

    picker.set_range_mode(True)
    assert recorder.values == [NoValue()]
    assert recorder.modes == ["range"]
    assert picker.display_text() == "Pick a date range"

    picker.set_range_mode(False)
    assert recorder.values == [NoValue(), SingleValue(date(2024, 1, 1))]
    assert recorder.modes == ["range", "single"]
    assert picker.cursor == date(2024, 1, 1)


def test_duo_flip_moves_cursor_to_range_start(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    picker.set_range_mode(True)
    picker.select_day(date(2026, 9, 9))
    picker.set_range_mode(False)
    picker.select_day(date(2024, 1, 1))

    picker.set_range_mode(True)
    assert picker.cursor == date(2026, 9, 9)
    assert picker.display_text() == "Sep 9, 2026 - ?"


def test_set_range_mode_outside_duo_is_silent(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, mode="single")
    picker.set_range_mode(True)
    assert recorder.values == []
    assert recorder.modes == []
    assert not picker.is_range_mode


def test_hover_in_single_mode_is_silent(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, mode="single")
    picker.hover_day(date(2024, 3, 3))
    assert recorder.values == []
    assert not any(cell and cell.in_range for cell in picker.day_cells())


def test_reset_without_handler_is_inert(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, with_reset=False, value=date(2024, 3, 3))
    assert not picker.can_reset()
    picker.reset()
    assert recorder.values == []
    assert picker.value == SingleValue(date(2024, 3, 3))


def test_reset_twice_emits_each_time(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, mode="range")
    picker.select_day(date(2024, 3, 3))
    assert picker.can_reset()

    picker.reset()
    picker.reset()
    empty = RangeValue(DateRange(from_=None, to=None))
    assert recorder.values == [empty, empty]
    assert recorder.resets == 2
    assert not picker.can_reset()
    assert picker.display_text() == "Pick a date range"


def test_single_reset_emits_no_value(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, value=date(2024, 3, 3))
    picker.reset()
    assert recorder.values == [NoValue()]
    assert picker.display_text() == "Pick a date"


def test_custom_placeholder(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, placeholder="When?")
    assert picker.display_text() == "When?"
    picker.set_range_mode(True)
    assert picker.display_text() == "When?"


def test_initial_range_value_seeds_range_and_cursor(scheduler, recorder) -> None:
    span = DateRange(from_=date(2023, 11, 20), to=date(2023, 12, 2))
    picker = _make_picker(scheduler, recorder, mode="range", value=span)

    assert picker.cursor == date(2023, 11, 20)
    assert picker.value == RangeValue(span)
    assert not picker.is_muted()


def test_day_cells_reflect_range_preview(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, mode="range")
    picker.select_day(date(2024, 3, 10))
    picker.hover_day(date(2024, 3, 12))

    cells = picker.day_cells()
    by_day = {cell.day: cell for cell in cells if cell is not None}
    assert len(cells) % 7 == 0
    assert cells[:5] == [None] * 5
    assert by_day[date(2024, 3, 10)].is_range_start
    assert by_day[date(2024, 3, 11)].in_range
    assert by_day[date(2024, 3, 12)].in_range
    assert not by_day[date(2024, 3, 13)].in_range
    assert by_day[TODAY].is_today


def test_day_cells_mark_single_selection(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, value=date(2024, 3, 20))
    selected = [cell.day for cell in picker.day_cells() if cell and cell.is_selected]
    assert selected == [date(2024, 3, 20)]


def test_set_value_syncs_without_emitting(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    picker.set_value(date(2024, 4, 1))
    picker.set_value(DateRange(from_=date(2024, 4, 2), to=date(2024, 4, 5)))
    picker.set_value(None)

    assert recorder.values == []
    assert picker.value == SingleValue(date(2024, 4, 1))
    picker.set_range_mode(True)
    assert recorder.values[-1] == RangeValue(DateRange(from_=date(2024, 4, 2), to=date(2024, 4, 5)))


def test_dispose_cancels_timers_and_silences_commands(clock, scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    picker.open()
    picker.toggle_view()
    picker.close()
    picker.dispose()

    assert picker.tick(clock.advance(CLOSE_RESET_DELAY_MS * 2)) == 0
    assert scheduler.pending_count == 0
    assert recorder.scrolls == []
    picker.select_day(date(2024, 3, 3))
    assert recorder.values == []


def test_datetime_range_endpoints_work_with_grid_days(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder, mode="range", value=DateRange(from_=datetime(2024, 3, 10, 9, 30)))
    picker.hover_day(date(2024, 3, 11))
    by_day = {cell.day: cell for cell in picker.day_cells() if cell is not None}
    assert by_day[date(2024, 3, 10)].is_range_start
    assert by_day[date(2024, 3, 11)].in_range

    picker.select_day(date(2024, 3, 12))
    assert recorder.values == [RangeValue(DateRange(from_=date(2024, 3, 10), to=date(2024, 3, 12)))]


def test_set_value_rejects_unknown_types(scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    with pytest.raises(ValidationError):
        picker.set_value("2024-03-10")
    assert picker.value == NoValue()


def test_toggle_view_while_closed_returns_to_days(clock, scheduler, recorder) -> None:
    picker = _make_picker(scheduler, recorder)
    picker.toggle_view()
    assert picker.view == "years"

    picker.tick(clock.advance(CLOSE_RESET_DELAY_MS))
    assert picker.view == "days"
