"""
Buffer module for hyprwiki.

Defines the InputBuffer class that backs the Find popup: a single line of text with
a cursor measured in characters (code points), never in bytes.
"""
from wcwidth import wcswidth


class InputBuffer:
    """A single editable line of text with a clamped insertion cursor."""
    def __init__(self, text: str = ""):
        self.text = text
        # Cursor is an insertion point in [0, len(text)]
        self.cursor = len(text)

    def __len__(self):
        return len(self.text)

    def clamp_cursor(self, position: int) -> int:
        """Clamp a candidate cursor position to a valid insertion point."""
        return max(0, min(position, len(self.text)))

    def move_left(self):
        """Move the cursor one character to the left (no-op at the start)."""
        self.cursor = self.clamp_cursor(self.cursor - 1)

    def move_right(self):
        """Move the cursor one character to the right (no-op at the end)."""
        self.cursor = self.clamp_cursor(self.cursor + 1)

    def insert(self, ch: str):
        """Insert a character at the cursor and advance past it."""
        self.text = self.text[:self.cursor] + ch + self.text[self.cursor:]
        self.move_right()

    def delete_backward(self):
        """Remove the character before the cursor, like Backspace."""
        if self.cursor == 0:
            return
        self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
        self.move_left()

    def reset(self):
        self.text = ""
        self.cursor = 0

    def submit(self, entries) -> str:
        """
        Append the current text to the entry log and clear the buffer.
        Returns the submitted text.
        """
        submitted = self.text
        entries.append(submitted)
        self.reset()
        return submitted

    def display_cursor(self) -> int:
        """Return the terminal column width of the text left of the cursor."""
        width = wcswidth(self.text[:self.cursor])
        # Non-printable characters make wcswidth give up; fall back to a count.
        return width if width >= 0 else self.cursor
