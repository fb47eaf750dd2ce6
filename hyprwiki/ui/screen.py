"""
hyprwiki/ui/screen.py

Implements all UI-drawing functionality for hyprwiki: the bordered sidebar and
content panes, the scrolled entry list, and the centered Find popup with its cursor.

build_frame() works out what goes where without touching curses; draw_frame() puts
a finished frame on a window. display() does both for the live context.
"""
import curses
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from wcwidth import wcswidth, wcwidth

from hyprwiki import logger
from hyprwiki.layout import Layout, Rect, compute_layout, popup_rect

TITLE = "hyprwiki"
POPUP_TITLE = "Find"
SIDEBAR_HINTS = [
    "^F: find",
    "↑/↓: scroll",
    "q: quit",
]
SIDEBAR_LOG_LINES = 5


###############################################################################
# TEXT WIDTH HELPERS
###############################################################################

def text_width(text: str) -> int:
    width = wcswidth(text)
    return width if width >= 0 else len(text)


def truncate_to_width(text: str, width: int) -> str:
    """Cut text so it occupies at most `width` terminal columns."""
    if width <= 0:
        return ""
    out = []
    used = 0
    for ch in text:
        w = max(0, wcwidth(ch))
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def pad_line(text: str, width: int) -> str:
    """Pad or trim a string to match the visual width."""
    text = truncate_to_width(text, width)
    return text + " " * (width - text_width(text))


###############################################################################
# FRAME
###############################################################################

@dataclass
class Frame:
    layout: Layout
    sidebar_rows: List[str] = field(default_factory=list)
    entry_rows: List[str] = field(default_factory=list)
    popup: Optional[Rect] = None
    popup_text: str = ""
    cursor: Optional[Tuple[int, int]] = None  # (y, x)


def sidebar_rows(rect: Rect, sidebar_log) -> List[str]:
    lines = [TITLE, ""] + SIDEBAR_HINTS
    recent = list(sidebar_log)[-SIDEBAR_LOG_LINES:]
    if recent:
        lines += [""] + recent
    return [pad_line(line, rect.inner_w) for line in lines[:rect.inner_h]]


def entry_rows(rect: Rect, entries, scroll) -> List[str]:
    """Rows of the content pane: the entries visible from the clamped scroll offset."""
    height = rect.inner_h
    start = scroll.effective_offset(len(entries), height)
    return [pad_line(text, rect.inner_w) for text in entries.window(start, height)]


def popup_cursor(popup: Rect, input_buffer) -> Tuple[int, int]:
    """Hardware cursor position inside the popup field, kept within its border."""
    x = popup.x + input_buffer.display_cursor() + 1
    x = min(x, popup.x + max(1, popup.w - 2))
    return popup.y + 1, x


def build_frame(mode: str, input_buffer, entries, scroll, max_y: int, max_x: int,
                sidebar_log=()) -> Frame:
    """Work out everything one screen refresh shows for the given state and size."""
    layout = compute_layout(max_y, max_x)
    frame = Frame(
        layout=layout,
        sidebar_rows=sidebar_rows(layout.sidebar, sidebar_log),
        entry_rows=entry_rows(layout.content, entries, scroll),
    )
    if mode == "editing":
        popup = popup_rect(layout.screen)
        frame.popup = popup
        frame.popup_text = truncate_to_width(input_buffer.text, popup.inner_w)
        frame.cursor = popup_cursor(popup, input_buffer)
    return frame


###############################################################################
# DRAWING
###############################################################################

def draw_box(win, rect: Rect, attr: int = 0, title: str = ""):
    """Draw a single-line border around rect, with an optional centered title."""
    if rect.h < 2 or rect.w < 2:
        return
    top = "┌" + "─" * (rect.w - 2) + "┐"
    if title:
        label = truncate_to_width(title, rect.w - 2)
        start = 1 + (rect.w - 2 - text_width(label)) // 2
        top = top[:start] + label + top[start + text_width(label):]
    logger.safe_addstr(win, rect.y, rect.x, top, attr)
    for row in range(rect.y + 1, rect.y + rect.h - 1):
        logger.safe_addstr(win, row, rect.x, "│", attr)
        logger.safe_addstr(win, row, rect.x + rect.w - 1, "│", attr)
    logger.safe_addstr(win, rect.y + rect.h - 1, rect.x,
                       "└" + "─" * (rect.w - 2) + "┘", attr)


def draw_rows(win, rect: Rect, rows: List[str], attr: int = 0):
    for i, row in enumerate(rows[:rect.inner_h]):
        logger.safe_addstr(win, rect.y + 1 + i, rect.x + 1, row, attr)


def clear_rect(win, rect: Rect):
    blank = " " * rect.w
    for row in range(rect.y, rect.y + rect.h):
        logger.safe_addstr(win, row, rect.x, blank)


def set_cursor_visible(visible: bool):
    try:
        curses.curs_set(1 if visible else 0)
    except curses.error:
        # Some terminals cannot hide or show the cursor.
        pass


def draw_frame(win, frame: Frame, theme):
    """Draw a frame onto win. The cursor is placed last so nothing moves it afterwards."""
    layout = frame.layout
    draw_box(win, layout.sidebar, theme.frame_attr)
    draw_rows(win, layout.sidebar, frame.sidebar_rows, theme.sidebar_attr)
    draw_box(win, layout.content, theme.frame_attr)
    draw_rows(win, layout.content, frame.entry_rows, theme.entry_attr)

    if frame.popup is not None:
        clear_rect(win, frame.popup)
        draw_box(win, frame.popup, theme.popup_attr, title=POPUP_TITLE)
        if frame.popup.inner_h > 0:
            logger.safe_addstr(win, frame.popup.y + 1, frame.popup.x + 1,
                               frame.popup_text, theme.editing_attr)

    if frame.cursor is not None:
        set_cursor_visible(True)
        try:
            win.move(*frame.cursor)
        except curses.error:
            logger.log(f"cannot move cursor to {frame.cursor}")
    else:
        set_cursor_visible(False)


def display(context):
    """
    Re-draw the entire screen for the current context state.
    """
    context.height, context.width = context.stdscr.getmaxyx()
    frame = build_frame(
        context.mode,
        context.input,
        context.entries,
        context.scroll,
        context.height,
        context.width,
        sidebar_log=context.sidebar_log,
    )
    context.stdscr.erase()
    draw_frame(context.stdscr, frame, context.theme)
    context.stdscr.refresh()
