import pytest

from kanbanfs.layout import (
    COLUMN_OVERHEAD,
    INDICATOR_WIDTH,
    MAX_COLUMN_WIDTH,
    MIN_COLUMN_WIDTH,
    compute_layout,
    help_text,
    scroll_info,
    task_window,
)


def test_zero_width_raises():
    with pytest.raises(ValueError):
        compute_layout(0, 40, 3)


def test_no_columns_raises():
    with pytest.raises(ValueError):
        compute_layout(120, 40, 0)


def test_narrow_terminal_uses_minimum_width():
    layout = compute_layout(40, 30, 5)
    assert layout.column_width == MIN_COLUMN_WIDTH
    assert layout.show_right_indicator
    assert not layout.show_left_indicator


def test_wide_terminal_caps_column_width():
    layout = compute_layout(1000, 50, 2)
    assert layout.column_width == MAX_COLUMN_WIDTH
    assert layout.end_column == 2
    assert not layout.show_right_indicator


@pytest.mark.parametrize("width", [15, 40, 80, 120, 200, 400])
@pytest.mark.parametrize("columns", [1, 3, 7])
def test_layout_invariants(width, columns):
    layout = compute_layout(width, 40, columns)
    assert 1 <= layout.max_visible_columns <= columns
    assert MIN_COLUMN_WIDTH <= layout.column_width <= MAX_COLUMN_WIDTH
    assert layout.rendered_column_width == layout.column_width + COLUMN_OVERHEAD
    assert len(layout.visible_columns) <= layout.max_visible_columns
    assert layout.left_margin >= 0
    assert layout.show_right_indicator == (layout.end_column < columns)


@pytest.mark.parametrize("width", [80, 150, 300])
def test_centering_fits_within_width(width):
    layout = compute_layout(width, 40, 3)
    if layout.total_width < width:
        assert layout.left_margin * 2 + layout.total_width <= width
    else:
        assert layout.left_margin == 0


def test_horizontal_offset_shows_left_indicator():
    base = compute_layout(40, 30, 5)
    layout = compute_layout(40, 30, 5, horizontal_offset=2)
    assert layout.show_left_indicator
    assert layout.start_column == 2
    assert layout.total_width == base.total_width + INDICATOR_WIDTH


def test_heights_follow_terminal():
    small = compute_layout(120, 30, 3)
    tall = compute_layout(120, 50, 3)
    assert tall.task_height - small.task_height == 20
    assert tall.column_height - tall.task_height == small.column_height - small.task_height


def test_task_window_empty_column():
    window = task_window(0, 0, 30)
    assert window.is_empty
    assert not window.show_up_indicator
    assert not window.show_down_indicator
    assert list(window.indices) == []


def test_task_window_shows_at_least_one_task():
    window = task_window(0, 5, 0)
    assert len(window.indices) == 1
    assert window.show_down_indicator


def test_task_window_scrolled_middle():
    window = task_window(2, 10, 12)
    assert window.start == 2
    assert window.show_up_indicator
    assert window.show_down_indicator
    assert window.end <= 10


def test_task_window_end_clamped_to_total():
    window = task_window(3, 4, 120)
    assert window.end == 4
    assert not window.show_down_indicator


def test_help_text():
    assert help_text() == (
        "Navigation: ←/h,→/l (columns)  ↑/k,↓/j (tasks)"
        "  •  "
        "Actions: a (add)  d (delete)  m/enter (move)  q (quit)"
    )


def test_scroll_info_empty_when_all_columns_fit():
    assert scroll_info(compute_layout(1000, 40, 2)) == ""


def test_scroll_info_describes_range():
    layout = compute_layout(40, 30, 5)
    info = scroll_info(layout)
    assert info.startswith("Columns: 1-")
    assert info.endswith(f"{layout.end_column} of 5")