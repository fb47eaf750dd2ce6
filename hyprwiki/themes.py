"""
themes.py

Holds the built-in hyprwiki colours in a Python dictionary form and turns them into
curses colour pairs / attributes for the screen module.
"""
import curses
from dataclasses import dataclass

DEFAULT_THEME = "boring"

# Colour pair numbers
PAIR_FRAME = 1
PAIR_ENTRY = 2
PAIR_SIDEBAR = 3
PAIR_POPUP = 4
PAIR_EDITING = 5


@dataclass(frozen=True)
class Theme:
    frame_attr: int = 0
    entry_attr: int = 0
    sidebar_attr: int = 0
    popup_attr: int = 0
    editing_attr: int = 0


def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to their color definitions.
    """
    return {
        "boring": {
            "bg": (40, 42, 54),
            "fg": (248, 248, 242),
            "accent": (98, 114, 164),
            "sidebar": (52, 55, 70),
            "editing": (80, 250, 123),
        },
    }


def plain_theme() -> Theme:
    """Attributes for terminals without colour support."""
    return Theme(
        frame_attr=0,
        entry_attr=0,
        sidebar_attr=curses.A_DIM,
        popup_attr=curses.A_BOLD,
        editing_attr=curses.A_BOLD,
    )


def apply_theme(theme_name: str = DEFAULT_THEME) -> Theme:
    """Initialize colour pairs for the named theme and return the matching attributes."""
    data = get_builtin_themes().get(theme_name)
    if data is None or not curses.has_colors():
        return plain_theme()

    try:
        curses.start_color()
        curses.use_default_colors()
    except curses.error:
        return plain_theme()

    if curses.can_change_color() and curses.COLORS >= 256:
        def to_curses(r, g, b):
            return int(r/255*1000), int(g/255*1000), int(b/255*1000)

        try:
            curses.init_color(16, *to_curses(*data["bg"]))
            curses.init_color(17, *to_curses(*data["fg"]))
            curses.init_color(18, *to_curses(*data["accent"]))
            curses.init_color(19, *to_curses(*data["sidebar"]))
            curses.init_color(20, *to_curses(*data["editing"]))
            curses.init_pair(PAIR_FRAME, 18, 16)
            curses.init_pair(PAIR_ENTRY, 17, 16)
            curses.init_pair(PAIR_SIDEBAR, 17, 19)
            curses.init_pair(PAIR_POPUP, 18, 16)
            curses.init_pair(PAIR_EDITING, 20, 16)
        except curses.error:
            return plain_theme()
    else:
        # Fallback color pairs (-1 keeps the terminal's own background)
        try:
            curses.init_pair(PAIR_FRAME, curses.COLOR_BLUE, -1)
            curses.init_pair(PAIR_ENTRY, curses.COLOR_WHITE, -1)
            curses.init_pair(PAIR_SIDEBAR, curses.COLOR_WHITE, -1)
            curses.init_pair(PAIR_POPUP, curses.COLOR_CYAN, -1)
            curses.init_pair(PAIR_EDITING, curses.COLOR_GREEN, -1)
        except curses.error:
            return plain_theme()

    return Theme(
        frame_attr=curses.color_pair(PAIR_FRAME),
        entry_attr=curses.color_pair(PAIR_ENTRY),
        sidebar_attr=curses.color_pair(PAIR_SIDEBAR),
        popup_attr=curses.color_pair(PAIR_POPUP) | curses.A_BOLD,
        editing_attr=curses.color_pair(PAIR_EDITING),
    )
