"""
Screen geometry for hyprwiki: the sidebar/content split and the centered popup.
"""
from dataclasses import dataclass

MARGIN = 1
SIDEBAR_PERCENT = 20
POPUP_WIDTH_PERCENT = 40
POPUP_HEIGHT_PERCENT = 10
# A bordered single-line field needs a top border, the text row and a bottom border.
POPUP_MIN_HEIGHT = 3


@dataclass(frozen=True)
class Rect:
    y: int
    x: int
    h: int
    w: int

    @property
    def inner_h(self) -> int:
        """Rows available inside a one-cell border."""
        return max(0, self.h - 2)

    @property
    def inner_w(self) -> int:
        return max(0, self.w - 2)


@dataclass(frozen=True)
class Layout:
    screen: Rect
    sidebar: Rect
    content: Rect


def compute_layout(max_y: int, max_x: int) -> Layout:
    """Split the screen (minus a margin) into a 20% sidebar and an 80% content pane."""
    screen = Rect(0, 0, max(0, max_y), max(0, max_x))
    usable_h = max(0, max_y - 2 * MARGIN)
    usable_w = max(0, max_x - 2 * MARGIN)

    sidebar_w = usable_w * SIDEBAR_PERCENT // 100
    content_w = usable_w - sidebar_w
    return Layout(
        screen=screen,
        sidebar=Rect(MARGIN, MARGIN, usable_h, sidebar_w),
        content=Rect(MARGIN, MARGIN + sidebar_w, usable_h, content_w),
    )


def _centered_span(total: int, percent: int, minimum: int = 0) -> tuple:
    size = min(total, max(minimum, total * percent // 100))
    return (total - size) // 2, size


def centered_rect(percent_x: int, percent_y: int, area: Rect, *, min_h: int = 0) -> Rect:
    """Return a rect of the given size percentages, centered independently on each axis."""
    dy, h = _centered_span(area.h, percent_y, min_h)
    dx, w = _centered_span(area.w, percent_x)
    return Rect(area.y + dy, area.x + dx, h, w)


def popup_rect(screen: Rect) -> Rect:
    return centered_rect(POPUP_WIDTH_PERCENT, POPUP_HEIGHT_PERCENT, screen, min_h=POPUP_MIN_HEIGHT)


def viewport_height(max_y: int, max_x: int) -> int:
    """Number of entry rows visible in the content pane for this terminal size."""
    return compute_layout(max_y, max_x).content.inner_h
