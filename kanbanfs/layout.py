"""Geometry of the board view: column widths, visible ranges and indicators."""

from __future__ import annotations

from dataclasses import dataclass

MIN_COLUMN_WIDTH = 25
MAX_COLUMN_WIDTH = 60
COLUMN_SPACING = 2
# Borders (2) plus horizontal padding (2 * 2) around a column's content.
COLUMN_OVERHEAD = 6
INDICATOR_WIDTH = 5
# Rows taken by help text, column title, spacing and borders.
RESERVED_TASK_ROWS = 8
# Rows taken outside a column's box.
RESERVED_COLUMN_ROWS = 6
# Rough height of one rendered task card.
CARD_ROWS = 6

LOADING_TEXT = "Loading..."
NO_COLUMNS_TEXT = "No columns"
LEFT_INDICATOR = "◄"
RIGHT_INDICATOR = "►"
UP_INDICATOR = "▲ more above ▲"
DOWN_INDICATOR = "▼ more below ▼"
EMPTY_COLUMN_TEXT = "(empty)"

_HELP_LINES = (
    "Navigation: ←/h,→/l (columns)  ↑/k,↓/j (tasks)",
    "Actions: a (add)  d (delete)  m/enter (move)  q (quit)",
)
_HELP_SEPARATOR = "  •  "


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    return int(a / b)


@dataclass(frozen=True)
class BoardLayout:
    """Where and how wide the columns of the board are drawn."""

    width: int
    height: int
    total_columns: int
    column_width: int
    max_visible_columns: int
    start_column: int
    end_column: int
    show_left_indicator: bool
    show_right_indicator: bool
    total_width: int
    left_margin: int

    @property
    def rendered_column_width(self) -> int:
        return self.column_width + COLUMN_OVERHEAD

    @property
    def visible_columns(self) -> range:
        return range(self.start_column, self.end_column)

    @property
    def task_height(self) -> int:
        """Rows available for task cards inside a column."""
        return self.height - RESERVED_TASK_ROWS

    @property
    def column_height(self) -> int:
        """Height given to each column box and scroll indicator."""
        return self.height - RESERVED_COLUMN_ROWS


@dataclass(frozen=True)
class TaskWindow:
    """The range of tasks drawn in one column and its scroll indicators."""

    start: int
    end: int
    total: int
    show_up_indicator: bool
    show_down_indicator: bool

    @property
    def indices(self) -> range:
        return range(self.start, self.end)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def compute_layout(
    width: int, height: int, total_columns: int, horizontal_offset: int = 0
) -> BoardLayout:
    """Work out column widths and the visible column range for a terminal size."""
    if width == 0:
        raise ValueError("terminal size is not known yet")
    if total_columns <= 0:
        raise ValueError("board has no columns")

    available = width - INDICATOR_WIDTH * 2
    spacing_needed = COLUMN_SPACING * (total_columns - 1)
    min_space_needed = (MIN_COLUMN_WIDTH + COLUMN_OVERHEAD) * total_columns + spacing_needed

    if available >= min_space_needed:
        proposed = _div(available - spacing_needed, total_columns) - COLUMN_OVERHEAD
        column_width = min(MAX_COLUMN_WIDTH, max(MIN_COLUMN_WIDTH, proposed))
    else:
        column_width = MIN_COLUMN_WIDTH

    rendered = column_width + COLUMN_OVERHEAD
    max_visible = _div(available + COLUMN_SPACING, rendered + COLUMN_SPACING)
    max_visible = min(total_columns, max(1, max_visible))

    start = horizontal_offset
    end = min(start + max_visible, total_columns)
    show_left = start > 0
    show_right = end < total_columns

    num_visible = end - start
    total_width = rendered * num_visible + COLUMN_SPACING * (num_visible - 1)
    if show_left:
        total_width += INDICATOR_WIDTH
    if show_right:
        total_width += INDICATOR_WIDTH

    left_margin = (width - total_width) // 2 if total_width < width else 0

    return BoardLayout(
        width=width,
        height=height,
        total_columns=total_columns,
        column_width=column_width,
        max_visible_columns=max_visible,
        start_column=start,
        end_column=end,
        show_left_indicator=show_left,
        show_right_indicator=show_right,
        total_width=total_width,
        left_margin=left_margin,
    )


def task_window(scroll_offset: int, total_tasks: int, viewport_height: int) -> TaskWindow:
    """Return which tasks of a column are drawn for a scroll offset and height."""
    max_visible = max(1, _div(viewport_height, CARD_ROWS))
    end = min(scroll_offset + max_visible, total_tasks)
    return TaskWindow(
        start=scroll_offset,
        end=end,
        total=total_tasks,
        show_up_indicator=scroll_offset > 0,
        show_down_indicator=end < total_tasks,
    )


def help_text() -> str:
    """The help line shown beneath the board."""
    return _HELP_SEPARATOR.join(_HELP_LINES)


def scroll_info(layout: BoardLayout) -> str:
    """Describe the visible column range, or '' when every column is shown."""
    if layout.total_columns <= layout.max_visible_columns:
        return ""
    return (
        f"Columns: {layout.start_column + 1}-{layout.end_column} "
        f"of {layout.total_columns}"
    )