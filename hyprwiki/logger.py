"""
Logger module for hyprwiki.

A small file-based debug log (the screen belongs to curses, so nothing can be printed
while the viewer runs) and a safe wrapper for curses output that clips text to the
window and logs drawing errors instead of raising them.
"""
import curses
import datetime

from wcwidth import wcwidth

# Define the log file path
LOG_FILE_PATH = "hyprwiki.log"

def log(message: str) -> None:
    """Append a timestamped message to the log file."""
    try:
        with open(LOG_FILE_PATH, 'a', encoding='utf-8') as f:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        # An unwritable log file must never take the viewer down.
        pass

def log_error(what: str, err: BaseException) -> None:
    log(f"ERROR {what}: {err!r}")

def clip_to_columns(text: str, columns: int) -> str:
    """Longest prefix of text that fits in `columns` terminal cells."""
    used = 0
    for i, ch in enumerate(text):
        used += max(wcwidth(ch), 0)
        if used > columns:
            return text[:i]
    return text

def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """
    Add a string to the curses window at the given position, clipped at the right
    edge of the window. Positions outside the window are skipped; curses errors that
    remain (the bottom-right cell) are logged.
    """
    max_y, max_x = window.getmaxyx()
    if not (0 <= y < max_y and 0 <= x < max_x):
        log(f"skipped addstr outside {max_y}x{max_x} window at ({y},{x})")
        return
    text = clip_to_columns(text, max_x - x)
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error as e:
        log_error(f"addstr at ({y},{x}) {text[:20]!r}", e)
