"""
Terminal session handling for hyprwiki.

The terminal is a scoped resource: curses (alternate screen), raw mode, keypad decoding
and mouse capture are switched on when the session starts and switched off again on
every way out of it, including when the event loop raises.
"""
import curses
import locale
from contextlib import contextmanager

from hyprwiki import logger


class TerminalError(Exception):
    """Raised when the terminal cannot deliver the next input event."""


def enable_mouse_capture():
    """Ask curses to report mouse events (wheel included) through KEY_MOUSE."""
    available, _old = curses.mousemask(curses.ALL_MOUSE_EVENTS)
    # Report presses immediately instead of waiting to combine them into clicks.
    curses.mouseinterval(0)
    return available


def restore_terminal(stdscr) -> None:
    """
    Undo everything terminal_session() set up. Each step is attempted even if an
    earlier one fails, so the user's shell is left usable.
    """
    steps = (
        ("disable mouse capture", lambda: curses.mousemask(0)),
        ("show cursor", lambda: curses.curs_set(1)),
        ("disable keypad", lambda: stdscr.keypad(False)),
        ("leave raw mode", curses.noraw),
        ("enable echo", curses.echo),
        ("leave alternate screen", curses.endwin),
    )
    for name, step in steps:
        try:
            step()
        except curses.error as e:
            logger.log_error(f"terminal teardown: {name}", e)


@contextmanager
def terminal_session():
    """Enter curses, raw mode and mouse capture; always restore them on exit."""
    # Wide characters need the user's locale before curses starts.
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        logger.log_error("setlocale", e)
    stdscr = curses.initscr()
    try:
        curses.noecho()
        curses.raw()
        stdscr.keypad(True)
        if not enable_mouse_capture():
            logger.log("mouse capture is not available on this terminal")
        logger.log("terminal session started")
        yield stdscr
    finally:
        restore_terminal(stdscr)
        logger.log("terminal session restored")


def read_raw(stdscr):
    """
    Block until the next key or mouse event and return it as delivered by curses:
    a one-character str for text, an int for special keys.
    """
    try:
        return stdscr.get_wch()
    except curses.error as e:
        raise TerminalError(f"failed to read input event: {e}") from e
