import unittest

from hyprwiki.buffer import InputBuffer
from hyprwiki.viewport import EntryLog


class TestInputBuffer(unittest.TestCase):
    def test_starts_empty(self) -> None:
        buf = InputBuffer()
        self.assertEqual(buf.text, "")
        self.assertEqual(buf.cursor, 0)

    def test_insert_advances_cursor(self) -> None:
        buf = InputBuffer()
        for ch in "abc":
            buf.insert(ch)
        self.assertEqual(buf.text, "abc")
        self.assertEqual(buf.cursor, 3)

    def test_insert_in_the_middle(self) -> None:
        buf = InputBuffer("ac")
        buf.move_left()
        buf.insert("b")
        self.assertEqual(buf.text, "abc")
        self.assertEqual(buf.cursor, 2)

    def test_insert_multibyte_characters_by_index(self) -> None:
        buf = InputBuffer()
        for ch in "héllo":
            buf.insert(ch)
        buf.move_left()
        buf.move_left()
        buf.insert("ß")
        self.assertEqual(buf.text, "hélßlo")
        self.assertEqual(buf.cursor, 4)
        buf.insert("日")
        self.assertEqual(buf.text, "hélß日lo")
        self.assertEqual(buf.cursor, 5)

    def test_delete_backward_scenario(self) -> None:
        buf = InputBuffer("abc")
        self.assertEqual(buf.cursor, 3)
        buf.delete_backward()
        self.assertEqual((buf.text, buf.cursor), ("ab", 2))
        buf.delete_backward()
        buf.delete_backward()
        self.assertEqual((buf.text, buf.cursor), ("", 0))
        buf.delete_backward()
        self.assertEqual((buf.text, buf.cursor), ("", 0))

    def test_delete_backward_at_start_keeps_text(self) -> None:
        buf = InputBuffer("xyz")
        for _ in range(5):
            buf.move_left()
        buf.delete_backward()
        self.assertEqual((buf.text, buf.cursor), ("xyz", 0))

    def test_delete_backward_removes_one_multibyte_character(self) -> None:
        buf = InputBuffer("a日本")
        buf.move_left()
        buf.delete_backward()
        self.assertEqual((buf.text, buf.cursor), ("a本", 1))

    def test_length_is_inserts_minus_successful_deletes(self) -> None:
        buf = InputBuffer()
        ops = "i d d i i i d i d d d d i".split()
        inserts = deletes = 0
        for op in ops:
            if op == "i":
                buf.insert("x")
                inserts += 1
            else:
                if buf.cursor > 0:
                    deletes += 1
                buf.delete_backward()
        self.assertEqual(len(buf), inserts - deletes)

    def test_move_left_then_right_returns_to_position(self) -> None:
        text = "hello"
        for p in range(len(text) + 1):
            buf = InputBuffer(text)
            buf.cursor = p
            buf.move_left()
            buf.move_right()
            expected = 1 if p == 0 else p
            self.assertEqual(buf.cursor, expected, f"from position {p}")

    def test_cursor_is_clamped_at_both_ends(self) -> None:
        buf = InputBuffer("ab")
        buf.move_right()
        self.assertEqual(buf.cursor, 2)
        buf.move_left()
        buf.move_left()
        buf.move_left()
        self.assertEqual(buf.cursor, 0)

    def test_submit_appends_and_resets(self) -> None:
        log = EntryLog()
        buf = InputBuffer("hi")
        self.assertEqual(buf.submit(log), "hi")
        self.assertEqual(list(log), ["hi"])
        self.assertEqual((buf.text, buf.cursor), ("", 0))

        buf.insert("x")
        buf.move_left()
        buf.submit(log)
        self.assertEqual((buf.text, buf.cursor), ("", 0))
        self.assertEqual(list(log), ["hi", "x"])

    def test_submit_of_empty_text_still_adds_an_entry(self) -> None:
        log = EntryLog()
        InputBuffer().submit(log)
        self.assertEqual(list(log), [""])

    def test_display_cursor_counts_wide_characters(self) -> None:
        buf = InputBuffer("ab")
        self.assertEqual(buf.display_cursor(), 2)
        buf = InputBuffer("日本")
        self.assertEqual(buf.display_cursor(), 4)
        buf.move_left()
        self.assertEqual(buf.display_cursor(), 2)


if __name__ == "__main__":
    unittest.main()
