"""
Tests for key decoding and command construction
"""
import pytest

from LOGMON.core.commands import Command, CommandType
from LOGMON.UI.app import LogMonitorApp
from LOGMON.UI.keymap import NORMAL_KEYS, PRIORITY_KEYS, filter_command_for_key

BINDINGS = {binding.key: binding for binding in LogMonitorApp.BINDINGS}


@pytest.mark.parametrize("key, expected", [
    ("up", CommandType.SCROLL_UP),
    ("pagedown", CommandType.PAGE_DOWN),
    ("f", CommandType.TOGGLE_FOLLOW),
    ("slash", CommandType.ENTER_FILTER_EDIT),
    ("tab", CommandType.NEXT_TAB),
])
def test_app_bindings(key, expected):
    action = BINDINGS[key].action
    assert action == f"command('{expected.value}')"
    assert Command.from_name(expected.value) == Command.of(expected)


def test_quit_binding():
    assert BINDINGS["q"].action == "quit"


def test_priority_bindings():
    assert {key for key, binding in BINDINGS.items() if binding.priority} == PRIORITY_KEYS


def test_every_normal_key_is_unique():
    keys = [key for key, _, _, _ in NORMAL_KEYS]
    assert len(keys) == len(set(keys))


class TestFilterKeys:

    def test_control_keys(self):
        assert filter_command_for_key("enter", None).type is CommandType.CONFIRM_FILTER
        assert filter_command_for_key("escape", None).type is CommandType.CANCEL_FILTER
        assert filter_command_for_key("backspace", None).type is CommandType.FILTER_BACKSPACE

    def test_printable_characters(self):
        """Keys bound outside the prompt are plain text inside it"""
        assert filter_command_for_key("q", "q") == Command.filter_char("q")
        assert filter_command_for_key("slash", "/") == Command.filter_char("/")
        assert filter_command_for_key("space", " ") == Command.filter_char(" ")

    def test_non_printable_ignored(self):
        assert filter_command_for_key("up", None) is None
        assert filter_command_for_key("ctrl+a", "\x01") is None


class TestCommand:

    def test_filter_char_needs_one_character(self):
        with pytest.raises(ValueError):
            Command.filter_char("ab")
        with pytest.raises(ValueError):
            Command.filter_char("")

    def test_from_name(self):
        assert Command.from_name("page_down") == Command(CommandType.PAGE_DOWN)

    def test_from_unknown_name(self):
        with pytest.raises(ValueError):
            Command.from_name("explode")
