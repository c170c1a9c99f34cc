"""Filesystem layout of boards, columns and tasks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

BOARD_METADATA_YAML_FILE = "metadata.yml"
BOARD_CONTENT_FILE = "board.md"
COLUMN_METADATA_YAML_FILE = "metadata.yml"
COLUMN_CONTENT_FILE = "column.md"
TASK_METADATA_FILE = "task.md"
TASK_METADATA_YAML_FILE = "metadata.yml"
COLUMNS_DIR = "columns"
TASKS_DIR = "tasks"


@dataclass(frozen=True)
class PathBuilder:
    """Builds paths under a root directory holding all boards."""

    boards_root: Path

    def __init__(self, boards_root: Union[str, Path]) -> None:
        object.__setattr__(self, "boards_root", Path(boards_root))

    def board_dir(self, board_id: str) -> Path:
        return self.boards_root / board_id

    def board_metadata_yaml(self, board_id: str) -> Path:
        return self.board_dir(board_id) / BOARD_METADATA_YAML_FILE

    def board_content(self, board_id: str) -> Path:
        return self.board_dir(board_id) / BOARD_CONTENT_FILE

    def column_dir(self, board_id: str, column_name: str) -> Path:
        return self.board_dir(board_id) / COLUMNS_DIR / column_name

    def column_metadata_yaml(self, board_id: str, column_name: str) -> Path:
        return self.column_dir(board_id, column_name) / COLUMN_METADATA_YAML_FILE

    def column_content(self, board_id: str, column_name: str) -> Path:
        return self.column_dir(board_id, column_name) / COLUMN_CONTENT_FILE

    def task_dir(self, board_id: str, column_name: str, task_folder_name: str) -> Path:
        return self.column_dir(board_id, column_name) / TASKS_DIR / task_folder_name

    def task_metadata(
        self, board_id: str, column_name: str, task_folder_name: str
    ) -> Path:
        return self.task_dir(board_id, column_name, task_folder_name) / TASK_METADATA_FILE

    def task_metadata_yaml(
        self, board_id: str, column_name: str, task_folder_name: str
    ) -> Path:
        return (
            self.task_dir(board_id, column_name, task_folder_name)
            / TASK_METADATA_YAML_FILE
        )