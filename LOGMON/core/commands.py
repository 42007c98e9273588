"""
User intents delivered to the controller as discrete commands
"""
from dataclasses import dataclass
from enum import Enum


class CommandType(Enum):
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TOGGLE_FOLLOW = "toggle_follow"
    TOGGLE_TIMESTAMPS = "toggle_timestamps"
    TOGGLE_LINE_NUMBERS = "toggle_line_numbers"
    ENTER_FILTER_EDIT = "enter_filter_edit"
    FILTER_CHAR = "filter_char"
    FILTER_BACKSPACE = "filter_backspace"
    CONFIRM_FILTER = "confirm_filter"
    CANCEL_FILTER = "cancel_filter"
    CLEAR_FILTER = "clear_filter"
    REFRESH_STATS = "refresh_stats"
    NEXT_TAB = "next_tab"
    PREV_TAB = "prev_tab"
    QUIT = "quit"


# Commands still honoured while the filter prompt is open
FILTER_EDIT_COMMANDS = frozenset({
    CommandType.FILTER_CHAR,
    CommandType.FILTER_BACKSPACE,
    CommandType.CONFIRM_FILTER,
    CommandType.CANCEL_FILTER,
    CommandType.QUIT,
})


@dataclass(frozen=True)
class Command:
    type: CommandType
    char: str = ""

    @classmethod
    def of(cls, command_type: CommandType) -> "Command":
        return cls(command_type)

    @classmethod
    def filter_char(cls, char: str) -> "Command":
        if len(char) != 1:
            raise ValueError(f"FilterChar takes exactly one character, got {char!r}")
        return cls(CommandType.FILTER_CHAR, char)

    @classmethod
    def from_name(cls, name: str) -> "Command":
        """Build an argument-less command from its action name (e.g. page_down)"""
        return cls(CommandType(name))
