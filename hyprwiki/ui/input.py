"""
Input handling for hyprwiki.

Turns whatever curses delivers for one read (a character, a special key code or a
mouse report) into a single Event, then applies at most one state change to the
viewer context for it.
"""
import curses
from dataclasses import dataclass

QUIT_KEY = "q"
TOGGLE_KEY = "f"  # with Ctrl

ENTER_CHARS = ("\n", "\r")
BACKSPACE_CHARS = ("\x7f", "\x08")
TAB_CHAR = "\t"

SPECIAL_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    curses.KEY_BACKSPACE: "backspace",
}


@dataclass(frozen=True)
class Event:
    kind: str              # "key" | "mouse" | "resize" | "ignored"
    code: str = ""         # "char", "up", "down", "left", "right", "enter", "backspace",
                           # "scroll_up", "scroll_down"
    char: str = ""
    ctrl: bool = False


IGNORED = Event("ignored")
RESIZE = Event("resize")


def _decode_char(ch: str) -> Event:
    if ch in ENTER_CHARS:
        return Event("key", "enter")
    if ch in BACKSPACE_CHARS:
        return Event("key", "backspace")
    if ch == TAB_CHAR:
        return IGNORED
    code = ord(ch)
    # Ctrl+A .. Ctrl+Z arrive as 0x01 .. 0x1a
    if 1 <= code <= 26:
        return Event("key", "char", char=chr(code + 96), ctrl=True)
    if code < 32 or code == 127:
        return IGNORED
    return Event("key", "char", char=ch)


def decode_mouse(bstate: int) -> Event:
    """Map a curses mouse button state to a wheel event (other buttons are ignored)."""
    wheel_up = getattr(curses, "BUTTON4_PRESSED", 0)
    wheel_down = getattr(curses, "BUTTON5_PRESSED", 0)
    if wheel_up and (bstate & wheel_up):
        return Event("mouse", "scroll_up")
    if wheel_down and (bstate & wheel_down):
        return Event("mouse", "scroll_down")
    return IGNORED


def decode_event(raw) -> Event:
    """Decode one value returned by get_wch() into an Event."""
    if isinstance(raw, str):
        if len(raw) != 1:
            return IGNORED
        return _decode_char(raw)
    if raw == curses.KEY_MOUSE:
        try:
            _, _mx, _my, _, bstate = curses.getmouse()
        except curses.error:
            return IGNORED
        return decode_mouse(bstate)
    if raw == curses.KEY_RESIZE:
        return RESIZE
    code = SPECIAL_KEYS.get(raw)
    if code is None:
        return IGNORED
    return Event("key", code)


def handle_event(context, event: Event):
    """
    Apply one event to the context. Quit, scrolling and the popup toggle work in
    every mode; text editing keys only while the popup is open.
    """
    if event.code == "char" and event.char == QUIT_KEY:
        context.graceful_exit()
        return

    # Arrow keys and the mouse wheel share the same transitions.
    if event.code in ("up", "scroll_up"):
        context.scroll.scroll_up()
        return
    if event.code in ("down", "scroll_down"):
        context.scroll.scroll_down(len(context.entries), context.viewport_height())
        return

    if event.code == "char" and event.ctrl and event.char == TOGGLE_KEY:
        context.toggle_popup()
        return

    if context.mode != "editing":
        return

    if event.code == "enter":
        context.submit_input()
    elif event.code == "char":
        context.input.insert(event.char)
    elif event.code == "backspace":
        context.input.delete_backward()
    elif event.code == "left":
        context.input.move_left()
    elif event.code == "right":
        context.input.move_right()
