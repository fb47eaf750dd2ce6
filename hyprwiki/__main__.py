"""
Main entry point and viewer context for hyprwiki.
"""
import curses

from hyprwiki import layout, logger, terminal, themes, ui
from hyprwiki.buffer import InputBuffer
from hyprwiki.viewport import EntryLog, ScrollState

FAREWELL = "Bye from Hyprland Wiki!"


class ViewerContext:
    """
    Holds the state of the viewer: the entry log, its scroll offset, the Find popup
    input and the current mode. The popup is visible exactly when the mode is
    "editing", so the two cannot drift apart.
    """
    def __init__(self, stdscr, theme=None):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()

        self.entries = EntryLog()
        self.scroll = ScrollState()
        self.input = InputBuffer()

        # Viewer modes: "normal", "editing"
        self.mode = "normal"

        # Sidebar log
        self.sidebar_log = []

        self.theme = theme if theme is not None else themes.plain_theme()

        # Running flag
        self.exit_flag = False

    @property
    def popup_visible(self) -> bool:
        return self.mode == "editing"

    def log_command(self, msg: str):
        """
        Log an action to the sidebar log (and debug log file).
        """
        self.sidebar_log.append(msg)
        if len(self.sidebar_log) > 5:
            self.sidebar_log = self.sidebar_log[-5:]
        logger.log(msg)

    def toggle_popup(self):
        """Open or close the Find popup, switching between normal and editing mode."""
        self.mode = "normal" if self.mode == "editing" else "editing"
        self.log_command("^F: find" if self.mode == "editing" else "^F: close")

    def submit_input(self):
        text = self.input.submit(self.entries)
        self.log_command(f"added: {text}")

    def viewport_height(self) -> int:
        """Visible entry rows for the terminal's current size."""
        self.height, self.width = self.stdscr.getmaxyx()
        return layout.viewport_height(self.height, self.width)

    def graceful_exit(self):
        """
        Leave the main loop. Terminal teardown happens in terminal_session().
        """
        logger.log("Viewer exited.")
        self.exit_flag = True


def main(stdscr, theme=None):
    context = ViewerContext(stdscr, theme=theme)

    # Main loop
    while not context.exit_flag:
        ui.screen.display(context)
        event = ui.input.decode_event(terminal.read_raw(stdscr))
        ui.input.handle_event(context, event)
    return context


def run() -> int:
    """
    Run the viewer in a terminal session. Errors end the session, are printed after
    the terminal is restored, and still exit with status 0.
    """
    error = None
    try:
        with terminal.terminal_session() as stdscr:
            main(stdscr, theme=themes.apply_theme())
    except (curses.error, terminal.TerminalError) as e:
        logger.log_error("viewer stopped", e)
        error = e

    print(FAREWELL)
    if error is not None:
        print(repr(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
