import unittest
from random import Random

from hyprwiki.layout import MARGIN, Rect, centered_rect, compute_layout, popup_rect, viewport_height


class TestLayoutInvariants(unittest.TestCase):
    def test_layout_invariants_random_sizes(self) -> None:
        rng = Random(0)
        for _ in range(500):
            max_y = rng.randint(0, 80)
            max_x = rng.randint(0, 220)
            layout = compute_layout(max_y, max_x)

            for rect in (layout.sidebar, layout.content):
                self.assertGreaterEqual(rect.w, 0)
                self.assertGreaterEqual(rect.h, 0)
                self.assertLessEqual(rect.x + rect.w, max(MARGIN, max_x - MARGIN))
                self.assertLessEqual(rect.y + rect.h, max(MARGIN, max_y - MARGIN))

            self.assertEqual(layout.sidebar.y, layout.content.y)
            self.assertEqual(layout.sidebar.h, layout.content.h)
            self.assertEqual(layout.content.x, layout.sidebar.x + layout.sidebar.w)

    def test_sidebar_takes_twenty_percent(self) -> None:
        layout = compute_layout(24, 102)
        self.assertEqual(layout.sidebar, Rect(1, 1, 22, 20))
        self.assertEqual(layout.content, Rect(1, 21, 22, 80))

    def test_viewport_height_is_inside_the_border(self) -> None:
        self.assertEqual(viewport_height(24, 80), 20)
        self.assertEqual(viewport_height(3, 80), 0)


class TestPopupGeometry(unittest.TestCase):
    def test_centered_on_both_axes(self) -> None:
        rect = centered_rect(40, 10, Rect(0, 0, 100, 200))
        self.assertEqual((rect.h, rect.w), (10, 80))
        self.assertEqual(rect.y, 45)
        self.assertEqual(rect.x, 60)

    def test_popup_keeps_room_for_one_text_row(self) -> None:
        popup = popup_rect(Rect(0, 0, 24, 80))
        self.assertEqual(popup.h, 3)
        self.assertEqual(popup.w, 32)
        self.assertEqual(popup.y, (24 - 3) // 2)
        self.assertEqual(popup.x, (80 - 32) // 2)

    def test_popup_fits_on_tiny_screens(self) -> None:
        for h in range(0, 6):
            for w in range(0, 12):
                screen = Rect(0, 0, h, w)
                popup = popup_rect(screen)
                self.assertLessEqual(popup.y + popup.h, h)
                self.assertLessEqual(popup.x + popup.w, w)
                self.assertGreaterEqual(popup.y, 0)
                self.assertGreaterEqual(popup.x, 0)


if __name__ == "__main__":
    unittest.main()
