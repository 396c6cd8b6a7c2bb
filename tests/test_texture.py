import math
import os
import tempfile
import unittest

from sphere_cli_renderer.errors import TextureFormatError, TextureLoadError
from sphere_cli_renderer.geometry import Coords
from sphere_cli_renderer.texture import TextureMap, sample


class TestTextureMapLoading(unittest.TestCase):
    def test_single_cell_texture(self) -> None:
        texture = TextureMap.from_text("X\n")
        self.assertEqual(texture.width, 1)
        self.assertEqual(texture.height, 1)
        self.assertEqual(texture.rows, ("X",))

    def test_height_counts_line_breaks(self) -> None:
        texture = TextureMap.from_text("ab\ncd")
        self.assertEqual(texture.width, 2)
        self.assertEqual(texture.height, 1)
        self.assertEqual(texture.rows, ("ab",))

    def test_width_counts_characters_not_bytes(self) -> None:
        texture = TextureMap.from_text("⣿⠀⣿\n⠀⠀⠀\n")
        self.assertEqual(texture.width, 3)
        self.assertEqual(texture.height, 2)

    def test_text_without_line_break_is_rejected(self) -> None:
        with self.assertRaises(TextureFormatError) as ctx:
            TextureMap.from_text("no breaks here")
        self.assertIn("line break", str(ctx.exception))

    def test_empty_text_and_empty_first_line_are_rejected(self) -> None:
        with self.assertRaises(TextureFormatError):
            TextureMap.from_text("")
        with self.assertRaises(TextureFormatError):
            TextureMap.from_text("\nabc\n")

    def test_format_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            TextureMap.from_text("x")

    def test_ragged_rows_are_logged(self) -> None:
        with self.assertLogs("sphere_cli_renderer.texture", level="WARNING") as logs:
            texture = TextureMap.from_text("abcd\nab\nabcd\n")
        self.assertEqual(texture.height, 3)
        self.assertIn("[1]", logs.output[0])

    def test_from_file_reads_whole_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "map")
            with open(path, "w", encoding="utf-8") as f:
                f.write("####\n....\n")
            texture = TextureMap.from_file(path)
        self.assertEqual((texture.width, texture.height), (4, 2))
        self.assertEqual(texture.rows, ("####", "...."))

    def test_missing_file_raises_load_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "missing")
            with self.assertRaises(TextureLoadError) as ctx:
                TextureMap.from_file(path)
        self.assertIsInstance(ctx.exception, OSError)
        self.assertEqual(ctx.exception.path, path)

    def test_cell_bounds(self) -> None:
        texture = TextureMap.from_text("abc\nde\n")
        self.assertEqual(texture.cell(0, 2), "c")
        self.assertEqual(texture.cell(1, 1), "e")
        self.assertIsNone(texture.cell(1, 2))
        self.assertIsNone(texture.cell(2, 0))
        self.assertIsNone(texture.cell(-1, 0))
        self.assertIsNone(texture.cell(0, -1))


class TestSample(unittest.TestCase):
    def test_no_intersection_is_blank(self) -> None:
        for text in ("X\n", "####\n####\n"):
            texture = TextureMap.from_text(text)
            for rotation in (0.0, 1.0, -3.0, 100.0):
                self.assertEqual(sample(None, rotation, texture), " ")

    def test_single_cell_texture_returns_its_character(self) -> None:
        texture = TextureMap.from_text("X\n")
        for long in (0.0, 0.3, 2.0, math.pi):
            for rotation in (0.0, 5.0, -1.0):
                self.assertEqual(sample(Coords(math.pi, long), rotation, texture), "X")

    def test_top_of_scan_is_one_past_last_row(self) -> None:
        # lat near 0 -> y = 0 -> row = height, outside the grid
        for text in ("X\n", "AAAA\nAAAA\nAAAA\nAAAA\n"):
            texture = TextureMap.from_text(text)
            self.assertEqual(sample(Coords(0.0, 1.0), 0.0, texture), " ")
            self.assertEqual(sample(Coords(0.01, 1.0), 0.0, texture), " ")

    def test_rows_are_read_bottom_up(self) -> None:
        texture = TextureMap.from_text("a\nb\nc\nd\n")
        self.assertEqual(sample(Coords(math.pi, 1.0), 0.0, texture), "a")
        self.assertEqual(sample(Coords(math.pi * 0.8, 1.0), 0.0, texture), "b")
        self.assertEqual(sample(Coords(math.pi * 0.6, 1.0), 0.0, texture), "c")
        self.assertEqual(sample(Coords(math.pi * 0.3, 1.0), 0.0, texture), "d")
        self.assertEqual(sample(Coords(math.pi * 0.1, 1.0), 0.0, texture), " ")

    def test_rotation_shifts_longitude_and_wraps(self) -> None:
        texture = TextureMap.from_text("abcd\n")
        bottom = math.pi

        self.assertEqual(sample(Coords(bottom, 0.5), 0.0, texture), "a")
        self.assertEqual(sample(Coords(bottom, 0.5), math.pi / 2, texture), "b")
        self.assertEqual(sample(Coords(bottom, 0.5), -1.0, texture), "d")
        self.assertEqual(sample(Coords(bottom, 0.5), 4 * math.pi, texture), "a")

    def test_nan_coordinates_degrade_to_blank(self) -> None:
        texture = TextureMap.from_text("##\n##\n")
        self.assertEqual(sample(Coords(math.nan, 1.0), 0.0, texture), " ")
        self.assertEqual(sample(Coords(1.0, math.nan), 0.0, texture), " ")

    def test_short_row_samples_blank_past_its_end(self) -> None:
        texture = TextureMap.from_text("abcd\na\n")
        # row 0 is "abcd", row 1 is "a"; lat near pi/2 reads row 1
        self.assertEqual(sample(Coords(math.pi / 2 + 0.1, 5.0), 0.0, texture), " ")

    def test_fallback_only_for_missing_cells(self) -> None:
        texture = TextureMap.from_text("ab\ncd\n")
        calls = []

        def fallback(long, y, height):
            calls.append((long, y, height))
            return "*"

        self.assertEqual(sample(Coords(0.0, 1.0), 0.0, texture, fallback=fallback), "*")
        self.assertEqual(calls, [(1.0, 0, 2)])

        self.assertEqual(sample(Coords(math.pi, 1.0), 0.0, texture, fallback=fallback), "a")
        self.assertEqual(len(calls), 1)

        self.assertEqual(sample(None, 0.0, texture, fallback=fallback), " ")
        self.assertEqual(len(calls), 1)


if __name__ == "__main__":
    unittest.main()
