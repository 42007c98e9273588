"""
Key decoding - translates Textual key names into controller commands
"""
from typing import List, Optional, Tuple

from LOGMON.core.commands import Command, CommandType

# (key, command, footer description, shown in footer)
NORMAL_KEYS: List[Tuple[str, CommandType, str, bool]] = [
    ("up", CommandType.SCROLL_UP, "Scroll up", False),
    ("down", CommandType.SCROLL_DOWN, "Scroll down", False),
    ("pageup", CommandType.PAGE_UP, "Page up", False),
    ("pagedown", CommandType.PAGE_DOWN, "Page down", False),
    ("f", CommandType.TOGGLE_FOLLOW, "Follow", True),
    ("t", CommandType.TOGGLE_TIMESTAMPS, "Timestamps", True),
    ("n", CommandType.TOGGLE_LINE_NUMBERS, "Line #", True),
    ("slash", CommandType.ENTER_FILTER_EDIT, "Filter", True),
    ("c", CommandType.CLEAR_FILTER, "Clear filter", True),
    ("r", CommandType.REFRESH_STATS, "Refresh stats", True),
    ("tab", CommandType.NEXT_TAB, "Next view", True),
    ("shift+tab", CommandType.PREV_TAB, "Prev view", False),
]

# Keys the screen would otherwise claim for focus/scroll handling
PRIORITY_KEYS = {"tab", "shift+tab", "up", "down", "pageup", "pagedown"}

FILTER_KEYS = {
    "enter": CommandType.CONFIRM_FILTER,
    "escape": CommandType.CANCEL_FILTER,
    "backspace": CommandType.FILTER_BACKSPACE,
}


def filter_command_for_key(key: str, character: Optional[str]) -> Optional[Command]:
    """
    Command for a key pressed while the filter prompt is open

    Args:
        key: Textual key name (e.g. "enter", "a", "space")
        character: The printable character for the key, if any

    Returns:
        The matching Command, or None for keys the prompt ignores
    """
    if key in FILTER_KEYS:
        return Command.of(FILTER_KEYS[key])
    if character is not None and len(character) == 1 and character.isprintable():
        return Command.filter_char(character)
    return None
