"""Focus and scroll state for a board of columns holding tasks."""

from __future__ import annotations

from typing import Iterable, Optional

# Rows taken by help text, column title, spacing and borders.
RESERVED_ROWS = 8
# Rough height of one rendered task card.
CARD_ROWS = 6
MIN_COLUMN_WIDTH = 30
COLUMN_SPACING = 2
INDICATOR_WIDTH = 5


class Navigator:
    """Tracks which column and task has focus and how far each view is scrolled."""

    def __init__(
        self,
        column_sizes: Optional[Iterable[int]] = None,
        width: int = 0,
        height: int = 0,
    ) -> None:
        self.column_sizes: list[int] = list(column_sizes or ())
        self.focused_column = 0
        self.focused_task = 0
        self.scroll_offsets: list[int] = [0] * len(self.column_sizes)
        self.horizontal_offset = 0
        self.width = width
        self.height = height

    def set_column_sizes(self, column_sizes: Iterable[int]) -> None:
        """Replace the task counts; scroll offsets reset if the column count changes."""
        sizes = list(column_sizes)
        if len(sizes) != len(self.scroll_offsets):
            self.scroll_offsets = [0] * len(sizes)
        self.column_sizes = sizes

    def resize(self, width: int, height: int) -> None:
        """Record a new terminal size and keep the focused column in view."""
        self.width = width
        self.height = height
        self.update_horizontal_scroll(self.visible_columns())

    def current_task_count(self) -> int:
        """Number of tasks in the focused column, 0 if focus is out of range."""
        if 0 <= self.focused_column < len(self.column_sizes):
            return self.column_sizes[self.focused_column]
        return 0

    def current_scroll_offset(self) -> int:
        if 0 <= self.focused_column < len(self.scroll_offsets):
            return self.scroll_offsets[self.focused_column]
        return 0

    def visible_task_count(self) -> int:
        """How many task cards fit vertically, at least one."""
        return max(1, int((self.height - RESERVED_ROWS) / CARD_ROWS))

    def visible_columns(self) -> int:
        """How many columns fit horizontally, at least one."""
        available = self.width - INDICATOR_WIDTH * 2
        return max(1, int(available / (MIN_COLUMN_WIDTH + COLUMN_SPACING)))

    def update_scroll(self, viewport_height: int) -> None:
        """Scroll the focused column so that the focused task is visible."""
        column = self.focused_column
        if not 0 <= column < len(self.scroll_offsets):
            return
        task_count = self.current_task_count()
        if task_count == 0:
            self.scroll_offsets[column] = 0
            return

        offset = self.scroll_offsets[column]
        if self.focused_task < offset:
            offset = self.focused_task
        elif self.focused_task >= offset + viewport_height:
            offset = self.focused_task - viewport_height + 1

        max_scroll = max(0, task_count - viewport_height)
        self.scroll_offsets[column] = max(0, min(offset, max_scroll))

    def update_horizontal_scroll(self, visible_columns: int) -> None:
        """Scroll horizontally so that the focused column is visible."""
        if visible_columns <= 0:
            visible_columns = 1
        total = len(self.column_sizes)
        if total == 0:
            self.horizontal_offset = 0
            return

        offset = self.horizontal_offset
        if self.focused_column < offset:
            offset = self.focused_column
        elif self.focused_column >= offset + visible_columns:
            offset = self.focused_column - visible_columns + 1

        max_scroll = max(0, total - visible_columns)
        self.horizontal_offset = max(0, min(offset, max_scroll))

    def clamp_task_focus(self) -> None:
        """Keep the focused task within the focused column."""
        task_count = self.current_task_count()
        if task_count == 0:
            self.focused_task = 0
        elif self.focused_task >= task_count:
            self.focused_task = task_count - 1

    def _enter_column(self) -> None:
        self.focused_task = 0
        self.clamp_task_focus()
        self.update_scroll(self.visible_task_count())
        self.update_horizontal_scroll(self.visible_columns())

    def move_left(self) -> bool:
        """Focus the column to the left; returns whether focus moved."""
        if self.focused_column <= 0:
            return False
        self.focused_column -= 1
        self._enter_column()
        return True

    def move_right(self) -> bool:
        """Focus the column to the right; returns whether focus moved."""
        if self.focused_column >= len(self.column_sizes) - 1:
            return False
        self.focused_column += 1
        self._enter_column()
        return True

    def move_up(self) -> bool:
        """Focus the task above; returns whether focus moved."""
        if self.focused_task <= 0:
            return False
        self.focused_task -= 1
        self.update_scroll(self.visible_task_count())
        return True

    def move_down(self) -> bool:
        """Focus the task below; returns whether focus moved."""
        if self.focused_task >= self.current_task_count() - 1:
            return False
        self.focused_task += 1
        self.update_scroll(self.visible_task_count())
        return True

    def status_message(self) -> str:
        """One-line summary of focus and terminal size."""
        return (
            f"Column: {self.focused_column + 1}/{len(self.column_sizes)} | "
            f"Task: {self.focused_task + 1}/{self.current_task_count()} | "
            f"Size: {self.width}x{self.height}"
        )