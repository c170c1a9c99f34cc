"""Single-file JSON board storage."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

DEFAULT_DATA_DIR = Path(".local") / "share" / "mkanban"
DEFAULT_FILE_NAME = "board.json"


class StorageError(Exception):
    """Raised when the board file cannot be read, parsed or written."""


@dataclass
class Task:
    title: str = ""
    description: str = ""


@dataclass
class Column:
    title: str = ""
    tasks: list[Task] = field(default_factory=list)


@dataclass
class Board:
    columns: list[Column] = field(default_factory=list)


def _as_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise StorageError(f"failed to unmarshal board: {what} must be a list")
    return value


def _as_str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise StorageError(f"failed to unmarshal board: {what} must be a string")
    return value


def _as_object(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise StorageError(f"failed to unmarshal board: {what} must be an object")
    return value


def _task_from(raw: Any) -> Task:
    obj = _as_object(raw, "task")
    return Task(
        title=_as_str(obj.get("title"), "task title"),
        description=_as_str(obj.get("description"), "task description"),
    )


def _column_from(raw: Any) -> Column:
    obj = _as_object(raw, "column")
    return Column(
        title=_as_str(obj.get("title"), "column title"),
        tasks=[_task_from(t) for t in _as_list(obj.get("tasks"), "tasks")],
    )


def board_to_json(board: Board) -> str:
    """Render a board as indented JSON."""
    data = {
        "columns": [
            {
                "title": column.title,
                "tasks": [
                    {"title": task.title, "description": task.description}
                    for task in column.tasks
                ],
            }
            for column in board.columns
        ]
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def board_from_json(text: Union[str, bytes]) -> Board:
    """Parse a board from JSON; unknown fields are ignored."""
    try:
        raw = json.loads(text)
    except ValueError as exc:
        raise StorageError(f"failed to unmarshal board: {exc}") from exc
    obj = _as_object(raw, "board")
    return Board(columns=[_column_from(c) for c in _as_list(obj.get("columns"), "columns")])


def default_board() -> Board:
    """Return the sample board used when no board file exists yet."""
    return Board(
        columns=[
            Column(
                title="Todo",
                tasks=[
                    Task(title="Design database schema"),
                    Task(title="Setup CI/CD pipeline"),
                ],
            ),
            Column(title="In Progress", tasks=[Task(title="Implement authentication")]),
            Column(title="Done", tasks=[Task(title="Initialize project")]),
        ]
    )


class BoardStorage:
    """Persists a single board as a JSON file in a data directory."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None) -> None:
        if data_dir is None:
            try:
                directory = Path.home() / DEFAULT_DATA_DIR
            except RuntimeError as exc:
                raise StorageError(f"failed to get home directory: {exc}") from exc
        else:
            directory = Path(data_dir)
        try:
            directory.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"failed to create data directory: {exc}") from exc
        self.data_path = directory / DEFAULT_FILE_NAME

    def load_board(self) -> Board:
        """Load the board, or the default board if the file does not exist."""
        try:
            data = self.data_path.read_bytes()
        except FileNotFoundError:
            return default_board()
        except OSError as exc:
            raise StorageError(f"failed to read board file: {exc}") from exc
        return board_from_json(data)

    def save_board(self, board: Board) -> None:
        """Write the board to disk."""
        try:
            self.data_path.write_text(board_to_json(board), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"failed to write board file: {exc}") from exc