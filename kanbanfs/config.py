"""Application configuration: typed settings, defaults and YAML persistence."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional, Union, get_origin

import yaml

DEFAULT_CONFIG_FILE_NAME = "config.yml"
DEFAULT_CONFIG_DIR = Path(".config") / "mkanban"
DEFAULT_BOARDS_DIR_NAME = "boards"
DEFAULT_DATA_DIR = Path(".local") / "share" / "mkanban"
DEFAULT_SOCKET_NAME = "mkanbad.sock"


class ConfigError(Exception):
    """Raised when the configuration cannot be read, parsed or written."""


@dataclass
class StorageConfig:
    boards_path: str = ""
    data_path: str = ""


@dataclass
class DaemonConfig:
    socket_dir: str = ""
    socket_name: str = ""


@dataclass
class ColumnStyle:
    padding_vertical: int = 0
    padding_horizontal: int = 0
    border_style: str = ""
    border_color: str = ""


@dataclass
class TextStyle:
    """Text styling; zero-valued fields are left out when saved."""

    foreground: str = ""
    background: str = ""
    bold: bool = False
    italic: bool = False
    padding_vertical: int = 0
    padding_horizontal: int = 0
    align: str = ""


@dataclass
class TaskCardStyle:
    border_color: str = ""


@dataclass
class PriorityColors:
    high: str = ""
    medium: str = ""
    low: str = ""
    default: str = ""


@dataclass
class DueDateColors:
    overdue: str = ""
    due_soon: str = ""
    upcoming: str = ""
    far_future: str = ""


@dataclass
class StylesConfig:
    column: ColumnStyle = field(default_factory=ColumnStyle)
    focused_column: ColumnStyle = field(default_factory=ColumnStyle)
    column_title: TextStyle = field(default_factory=TextStyle)
    task: TextStyle = field(default_factory=TextStyle)
    selected_task: TextStyle = field(default_factory=TextStyle)
    help: TextStyle = field(default_factory=TextStyle)
    task_card: TaskCardStyle = field(default_factory=TaskCardStyle)
    selected_task_card: TaskCardStyle = field(default_factory=TaskCardStyle)
    description: TextStyle = field(default_factory=TextStyle)
    tag: TextStyle = field(default_factory=TextStyle)
    due_date: TextStyle = field(default_factory=TextStyle)
    overdue: TextStyle = field(default_factory=TextStyle)
    priority: PriorityColors = field(default_factory=PriorityColors)
    due_date_urgency: DueDateColors = field(default_factory=DueDateColors)
    scroll_indicator: TextStyle = field(default_factory=TextStyle)


@dataclass
class TUIConfig:
    styles: StylesConfig = field(default_factory=StylesConfig)


@dataclass
class KeybindingsConfig:
    up: list[str] = field(default_factory=list)
    down: list[str] = field(default_factory=list)
    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)
    move: list[str] = field(default_factory=list)
    add: list[str] = field(default_factory=list)
    delete: list[str] = field(default_factory=list)
    quit: list[str] = field(default_factory=list)


@dataclass
class GitSyncConfig:
    enabled: bool = False
    auto_sync_branches: bool = False
    watch_for_changes: bool = False
    create_tasks_for_remotes: bool = False


@dataclass
class SessionTrackingConfig:
    enabled: bool = False
    poll_interval: int = 0
    tracker_type: str = ""
    general_board_name: str = ""
    git_sync: GitSyncConfig = field(default_factory=GitSyncConfig)


@dataclass
class Config:
    storage: StorageConfig = field(default_factory=StorageConfig)
    daemon: DaemonConfig = field(default_factory=DaemonConfig)
    tui: TUIConfig = field(default_factory=TUIConfig)
    keybindings: KeybindingsConfig = field(default_factory=KeybindingsConfig)
    session_tracking: SessionTrackingConfig = field(
        default_factory=SessionTrackingConfig
    )


def _fail(where: str, expected: str) -> ConfigError:
    return ConfigError(f"failed to parse config file: {where} must be {expected}")


def _convert(tp: Any, value: Any, where: str) -> Any:
    if is_dataclass(tp):
        return _from_dict(tp, value, where)
    if tp is bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        raise _fail(where, "a boolean")
    if tp is int:
        if value is None:
            return 0
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise _fail(where, "an integer")
    if tp is str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        raise _fail(where, "a string")
    if get_origin(tp) is list:
        if value is None:
            return []
        if not isinstance(value, list):
            raise _fail(where, "a list")
        return [_convert(str, item, f"{where}[{i}]") for i, item in enumerate(value)]
    raise ConfigError(f"unsupported configuration type at {where}")


def _from_dict(cls: Any, data: Any, where: str) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise _fail(where or "config", "a mapping")
    values = {}
    for f in fields(cls):
        if f.name in data:
            path = f"{where}.{f.name}" if where else f.name
            values[f.name] = _convert(f.type, data[f.name], path)
    return cls(**values)


def _to_dict(obj: Any) -> dict[str, Any]:
    omit_empty = isinstance(obj, TextStyle)
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if omit_empty and not value:
            continue
        if is_dataclass(value):
            result[f.name] = _to_dict(value)
        elif isinstance(value, list):
            result[f.name] = list(value)
        else:
            result[f.name] = value
    return result


def config_from_dict(data: Any) -> Config:
    """Build a Config from parsed YAML; missing fields take zero values."""
    return _from_dict(Config, data, "")


def config_to_dict(config: Config) -> dict[str, Any]:
    """Render a Config as plain data ready for YAML."""
    return _to_dict(config)


def default_config(home: Union[str, Path]) -> Config:
    """Return the configuration written when none exists yet."""
    data_dir = Path(home) / DEFAULT_DATA_DIR
    return Config(
        storage=StorageConfig(
            boards_path=str(data_dir / DEFAULT_BOARDS_DIR_NAME),
            data_path=str(data_dir),
        ),
        daemon=DaemonConfig(socket_dir=str(data_dir), socket_name=DEFAULT_SOCKET_NAME),
        tui=TUIConfig(
            styles=StylesConfig(
                column=ColumnStyle(1, 2, "rounded", "240"),
                focused_column=ColumnStyle(1, 2, "rounded", "62"),
                column_title=TextStyle(foreground="99", bold=True, align="center"),
                task=TextStyle(foreground="252", padding_horizontal=1),
                selected_task=TextStyle(
                    foreground="230",
                    background="62",
                    bold=True,
                    padding_horizontal=1,
                ),
                help=TextStyle(
                    foreground="241", padding_vertical=1, padding_horizontal=2
                ),
                task_card=TaskCardStyle(border_color="#444444"),
                selected_task_card=TaskCardStyle(border_color="#A8DADC"),
                description=TextStyle(
                    foreground="#888888", italic=True, padding_horizontal=2
                ),
                tag=TextStyle(foreground="#A8DADC", padding_horizontal=2),
                due_date=TextStyle(foreground="#999999", padding_horizontal=2),
                overdue=TextStyle(
                    foreground="#FF6B6B", bold=True, padding_horizontal=2
                ),
                priority=PriorityColors(
                    high="#FF6B6B",
                    medium="#FFE66D",
                    low="#95E1D3",
                    default="#999999",
                ),
                due_date_urgency=DueDateColors(
                    overdue="#FF6B6B",
                    due_soon="#FFE66D",
                    upcoming="#A8DADC",
                    far_future="#999999",
                ),
                scroll_indicator=TextStyle(foreground="#999999", bold=True),
            )
        ),
        keybindings=KeybindingsConfig(
            up=["up", "k"],
            down=["down", "j"],
            left=["left", "h"],
            right=["right", "l"],
            move=["m", "enter"],
            add=["a"],
            delete=["d"],
            quit=["q", "ctrl+c"],
        ),
        session_tracking=SessionTrackingConfig(
            enabled=True,
            poll_interval=5,
            tracker_type="tmux",
            general_board_name="General Tasks",
            git_sync=GitSyncConfig(
                enabled=True,
                auto_sync_branches=True,
                watch_for_changes=True,
                create_tasks_for_remotes=False,
            ),
        ),
    )


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigError(f"failed to get home directory: {exc}") from exc


class ConfigLoader:
    """Loads and saves the configuration file, creating defaults on first use."""

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        home: Optional[Union[str, Path]] = None,
    ) -> None:
        self.home = Path(home) if home is not None else _home_dir()
        if config_path is None:
            self.config_path = (
                self.home / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE_NAME
            )
        else:
            self.config_path = Path(config_path)

    def load(self) -> Config:
        """Read the configuration, writing the defaults first if it is missing."""
        if not self.config_path.exists():
            return self._create_default()
        try:
            text = self.config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to read config file: {exc}") from exc
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"failed to parse config file: {exc}") from exc
        return config_from_dict(data)

    def save(self, config: Config) -> None:
        """Write the configuration as YAML."""
        try:
            self.config_path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"failed to create config directory: {exc}") from exc
        try:
            text = yaml.safe_dump(
                config_to_dict(config),
                sort_keys=False,
                default_flow_style=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as exc:
            raise ConfigError(f"failed to marshal config: {exc}") from exc
        try:
            self.config_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to write config file: {exc}") from exc

    def _create_default(self) -> Config:
        config = default_config(self.home)
        self.save(config)
        try:
            Path(config.storage.boards_path).mkdir(
                mode=0o755, parents=True, exist_ok=True
            )
        except OSError as exc:
            raise ConfigError(f"failed to create boards directory: {exc}") from exc
        return config