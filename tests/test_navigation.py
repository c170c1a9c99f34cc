import pytest

from kanbanfs.navigation import Navigator


def _offset(nav: Navigator) -> int:
    return nav.scroll_offsets[nav.focused_column]


def _visible(nav: Navigator) -> bool:
    offset = _offset(nav)
    return offset <= nav.focused_task < offset + nav.visible_task_count()


def test_status_message_format():
    nav = Navigator([2, 0, 1])
    assert nav.status_message() == "Column: 1/3 | Task: 1/2 | Size: 0x0"


def test_status_message_after_resize():
    nav = Navigator([4])
    nav.resize(120, 40)
    assert nav.status_message() == "Column: 1/1 | Task: 1/4 | Size: 120x40"


def test_minimums_for_tiny_terminal():
    nav = Navigator([3], width=0, height=0)
    assert nav.visible_task_count() == 1
    assert nav.visible_columns() == 1


def test_visible_counts_grow_with_size():
    small = Navigator([1], width=50, height=20)
    large = Navigator([1], width=500, height=200)
    assert large.visible_task_count() > small.visible_task_count()
    assert large.visible_columns() > small.visible_columns()


def test_current_task_count_out_of_range():
    nav = Navigator([5])
    nav.focused_column = 3
    assert nav.current_task_count() == 0


def test_move_down_stops_at_last_task():
    nav = Navigator([3], width=100, height=30)
    moves = [nav.move_down() for _ in range(5)]
    assert moves == [True, True, False, False, False]
    assert nav.focused_task == 2


def test_move_up_stops_at_first_task():
    nav = Navigator([3], width=100, height=30)
    nav.move_down()
    assert nav.move_up() is True
    assert nav.move_up() is False
    assert nav.focused_task == 0


def test_scroll_keeps_focused_task_visible_going_down_and_up():
    nav = Navigator([20], width=100, height=20)
    for _ in range(19):
        nav.move_down()
        assert _visible(nav)
    assert nav.focused_task == 19
    assert _offset(nav) == 20 - nav.visible_task_count()
    for _ in range(19):
        nav.move_up()
        assert _visible(nav)
    assert _offset(nav) == 0


def test_move_right_and_left_reset_task_focus():
    nav = Navigator([4, 2, 0], width=200, height=40)
    nav.move_down()
    nav.move_down()
    assert nav.move_right() is True
    assert nav.focused_column == 1
    assert nav.focused_task == 0
    assert nav.move_right() is True
    assert nav.focused_task == 0
    assert nav.current_task_count() == 0
    assert nav.move_right() is False
    assert nav.move_left() is True
    assert nav.focused_column == 1


def test_move_left_at_first_column():
    nav = Navigator([1, 1])
    assert nav.move_left() is False
    assert nav.focused_column == 0


def test_horizontal_scroll_follows_focus():
    nav = Navigator([1] * 10, width=0, height=30)
    assert nav.visible_columns() == 1
    for expected in range(1, 10):
        nav.move_right()
        assert nav.horizontal_offset == expected
    for _ in range(9):
        nav.move_left()
        visible = nav.visible_columns()
        assert nav.horizontal_offset <= nav.focused_column < nav.horizontal_offset + visible
    assert nav.horizontal_offset == 0


def test_update_horizontal_scroll_clamps_to_max():
    nav = Navigator([1, 1, 1])
    nav.horizontal_offset = 5
    nav.update_horizontal_scroll(2)
    assert nav.horizontal_offset == 1


def test_update_horizontal_scroll_nonpositive_treated_as_one():
    nav = Navigator([1, 1, 1])
    nav.focused_column = 2
    nav.update_horizontal_scroll(0)
    assert nav.horizontal_offset == 2


def test_update_horizontal_scroll_no_columns():
    nav = Navigator([])
    nav.horizontal_offset = 4
    nav.update_horizontal_scroll(3)
    assert nav.horizontal_offset == 0


def test_resize_brings_focused_column_into_view():
    nav = Navigator([1] * 6, width=1000, height=30)
    nav.focused_column = 5
    nav.resize(0, 30)
    assert nav.horizontal_offset == 5


def test_update_scroll_empty_column_resets_offset():
    nav = Navigator([0])
    nav.scroll_offsets[0] = 3
    nav.update_scroll(2)
    assert nav.scroll_offsets == [0]


def test_update_scroll_clamps_to_max():
    nav = Navigator([4])
    nav.scroll_offsets[0] = 10
    nav.focused_task = 3
    nav.update_scroll(10)
    assert nav.scroll_offsets[0] == 0


def test_update_scroll_ignores_out_of_range_column():
    nav = Navigator([5, 5])
    nav.focused_column = 7
    nav.update_scroll(1)
    assert nav.scroll_offsets == [0, 0]


@pytest.mark.parametrize("focus, count, expected", [(5, 3, 2), (1, 0, 0), (1, 3, 1)])
def test_clamp_task_focus(focus, count, expected):
    nav = Navigator([count])
    nav.focused_task = focus
    nav.clamp_task_focus()
    assert nav.focused_task == expected


def test_set_column_sizes_resets_offsets_when_count_changes():
    nav = Navigator([10, 10])
    nav.scroll_offsets = [3, 4]
    nav.set_column_sizes([10, 10, 1])
    assert nav.scroll_offsets == [0, 0, 0]
    assert nav.column_sizes == [10, 10, 1]


def test_set_column_sizes_keeps_offsets_when_count_same():
    nav = Navigator([10, 10])
    nav.scroll_offsets = [3, 4]
    nav.set_column_sizes([11, 12])
    assert nav.scroll_offsets == [3, 4]
    assert nav.current_task_count() == 11