from types import SimpleNamespace

import pytest

from kanbanfs.keymap import KeyBinding, build_keymap, format_keys_help

DEFAULTS = {
    "up": ["up", "k"],
    "down": ["down", "j"],
    "left": ["left", "h"],
    "right": ["right", "l"],
    "move": ["m", "enter"],
    "add": ["a"],
    "delete": ["d"],
    "quit": ["q", "ctrl+c"],
}


def test_format_keys_help():
    assert format_keys_help(["up", "k"]) == "↑/k"
    assert format_keys_help([]) == ""
    assert format_keys_help(["m", "enter"]) == "m/enter"


def test_binding_matches():
    binding = KeyBinding(("a", "b"), "a/b", "add task")
    assert binding.matches("a") is True
    assert binding.matches("c") is False


@pytest.mark.parametrize(
    "key,action",
    [
        ("k", "up"),
        ("up", "up"),
        ("j", "down"),
        ("h", "left"),
        ("right", "right"),
        ("enter", "move"),
        ("a", "add"),
        ("d", "delete"),
        ("ctrl+c", "quit"),
    ],
)
def test_action_for_defaults(key, action):
    assert build_keymap(DEFAULTS).action_for(key) == action


def test_unbound_key():
    keymap = build_keymap(DEFAULTS)
    assert keymap.action_for("x") is None
    assert keymap.action_for("") is None


def test_help_text():
    keymap = build_keymap(DEFAULTS)
    assert keymap.move.help_desc == "move task"
    assert keymap.move.help_key == "m/enter"
    assert keymap.left.help_key == format_keys_help(DEFAULTS["left"])


def test_quit_takes_precedence():
    keymap = build_keymap({"up": ["q"], "quit": ["q"]})
    assert keymap.action_for("q") == "quit"


def test_object_with_attributes_and_missing_actions():
    keymap = build_keymap(SimpleNamespace(add=["n"], delete=["x"]))
    assert keymap.action_for("n") == "add"
    assert keymap.action_for("x") == "delete"
    assert keymap.up.keys == ()
    assert keymap.up.help_key == ""