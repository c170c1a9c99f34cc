"""Key bindings for the board view, built from configured key lists."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional

_KEY_SYMBOLS = {"up": "↑", "down": "↓", "left": "←", "right": "→"}

_DESCRIPTIONS = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "move": "move task",
    "add": "add task",
    "delete": "delete task",
    "quit": "quit",
}

# Order in which bindings are checked when a key is pressed.
_MATCH_ORDER = ("quit", "left", "right", "up", "down", "move", "add", "delete")


def format_keys_help(keys: Iterable[str]) -> str:
    """Join keys with '/', showing arrow keys as arrow symbols."""
    return "/".join(_KEY_SYMBOLS.get(key, key) for key in keys)


@dataclass(frozen=True)
class KeyBinding:
    """A set of keys bound to one action, with help text."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys


@dataclass(frozen=True)
class KeyMap:
    """All board actions and their bindings."""

    up: KeyBinding
    down: KeyBinding
    left: KeyBinding
    right: KeyBinding
    move: KeyBinding
    add: KeyBinding
    delete: KeyBinding
    quit: KeyBinding

    def action_for(self, key: str) -> Optional[str]:
        """Return the name of the first action bound to key, or None."""
        for action in _MATCH_ORDER:
            if getattr(self, action).matches(key):
                return action
        return None


def _keys_for(keybindings: Any, action: str) -> tuple[str, ...]:
    if isinstance(keybindings, Mapping):
        keys = keybindings.get(action)
    else:
        keys = getattr(keybindings, action, None)
    return tuple(keys or ())


def build_keymap(keybindings: Any) -> KeyMap:
    """Build a KeyMap from a mapping or object listing keys for each action."""
    bindings = {}
    for action, description in _DESCRIPTIONS.items():
        keys = _keys_for(keybindings, action)
        bindings[action] = KeyBinding(keys, format_keys_help(keys), description)
    return KeyMap(**bindings)