"""
Viewport module for hyprwiki.

Holds the entry log (the append-only list of submitted strings shown in the content
pane) and the scroll state that decides which slice of it is visible.
"""


def max_scroll(entry_count: int, viewport_height: int) -> int:
    """Largest offset that still fills the viewport."""
    return max(0, entry_count - max(0, viewport_height))


class EntryLog:
    """Append-only ordered sequence of submitted strings."""
    def __init__(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def append(self, text: str):
        self._entries.append(text)

    def window(self, offset: int, height: int) -> list:
        """Return the entries visible from `offset` in a viewport of `height` rows."""
        if height <= 0:
            return []
        return self._entries[offset:offset + height]


class ScrollState:
    """
    Index of the first visible entry.

    The stored offset is only clamped when it moves; renders clamp it again against
    the current viewport (see effective_offset) so a temporary resize does not lose it.
    """
    def __init__(self):
        self.offset = 0

    def scroll_up(self):
        if self.offset > 0:
            self.offset -= 1

    def scroll_down(self, entry_count: int, viewport_height: int):
        if self.offset < max_scroll(entry_count, viewport_height):
            self.offset += 1

    def effective_offset(self, entry_count: int, viewport_height: int) -> int:
        return min(self.offset, max_scroll(entry_count, viewport_height))
