"""
Test cases for the recognizer and its template store.
"""
import threading
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from qgesture.config import RecognizerConfig
from qgesture.recognizer import Recognizer
from qgesture.templates import DEFAULT_TEMPLATES
from qgesture.types import (
    NO_MATCH, Point, Result, EmptyGestureError, DegenerateGestureError, InvalidSampleError,
)


LINE = [(12, 347, 1), (119, 347, 1)]
CHECK_MARK = [(10, 50, 1), (30, 80, 1), (90, 10, 1)]
ZIGZAG = [(0, 0, 1), (20, 40, 1), (40, 0, 1), (60, 40, 1), (80, 0, 1)]


def triples(coords):
    return [tuple(coords[i:i + 3]) for i in range(0, len(coords), 3)]


class TestRecognize(unittest.TestCase):
    """Recognition against the built-in templates."""

    def setUp(self):
        self.recognizer = Recognizer()

    def test_line(self):
        result = self.recognizer.recognize(LINE)

        self.assertEqual(result.name, "line")
        self.assertEqual(result.score, 1.0)
        self.assertGreaterEqual(result.time_ms, 0.0)
        self.assertTrue(result.is_recognized)

    def test_every_builtin_recognizes_itself(self):
        for name, coords in DEFAULT_TEMPLATES:
            result = self.recognizer.recognize(triples(coords))
            self.assertEqual(result.name, name)
            self.assertEqual(result.score, 1.0, name)

    def test_accepts_point_objects_and_mappings(self):
        as_points = [Point(x, y, s) for x, y, s in LINE]
        as_dicts = [{"x": x, "y": y, "stroke_id": s} for x, y, s in LINE]

        self.assertEqual(self.recognizer.recognize(as_points).name, "line")
        self.assertEqual(self.recognizer.recognize(as_dicts).name, "line")

    def test_scaled_and_translated_copy(self):
        coords = dict(DEFAULT_TEMPLATES)["asterisk"]
        moved = [(x * 2 + 40, y * 2 - 100, s) for x, y, s in triples(coords)]

        result = self.recognizer.recognize(moved)
        self.assertEqual(result.name, "asterisk")
        self.assertGreater(result.score, 0.9)

    def test_score_range(self):
        result = self.recognizer.recognize(ZIGZAG)

        self.assertNotEqual(result.name, NO_MATCH)
        self.assertGreater(result.score, 0.0)
        self.assertLessEqual(result.score, 1.0)

    def test_empty_input(self):
        result = self.recognizer.recognize([])

        self.assertEqual(result.name, NO_MATCH)
        self.assertEqual(result.score, 0.0)
        self.assertFalse(result.is_recognized)

    def test_degenerate_input(self):
        for points in ([(5, 5, 1)], [(5, 5, 1), (5, 5, 1)], [(0, 0, 1), (40, 40, 2)]):
            result = self.recognizer.recognize(points)
            self.assertEqual(result.name, NO_MATCH)
            self.assertEqual(result.score, 0.0)

    def test_non_finite_input(self):
        nan, inf = float("nan"), float("inf")
        for points in (
            [(0, 0, 1), (nan, 5, 1), (10, 10, 1)],
            [(0, 0, 1), (inf, 5, 1)],
            [(0, 0, 1), (5, -inf, 1)],
            [Point(0, 0, 1), Point(nan, nan, 1)],
            [(0, 0, 1), (1e308, 5, 1), (-1e308, 10, 1)],
        ):
            result = self.recognizer.recognize(points)
            self.assertEqual(result.name, NO_MATCH, points)
            self.assertEqual(result.score, 0.0)

    def test_malformed_samples(self):
        for points in ([(1, 2), ("x", 3)], [{"y": 1}], [(1, 2, 3, 4)], [None]):
            result = self.recognizer.recognize(points)
            self.assertEqual(result.name, NO_MATCH, points)

    def test_no_templates(self):
        recognizer = Recognizer(RecognizerConfig(load_defaults=False))

        self.assertEqual(recognizer.gesture_count(), 0)
        self.assertEqual(recognizer.recognize(LINE).name, NO_MATCH)


class TestTemplateStore(unittest.TestCase):
    """Adding, deleting and resetting templates."""

    def setUp(self):
        self.recognizer = Recognizer()

    def test_default_count(self):
        self.assertEqual(Recognizer.DEFAULT_COUNT, 16)
        self.assertEqual(self.recognizer.gesture_count(), 16)
        self.assertEqual(self.recognizer.gesture_names()[:2], ["X", "line"])

    def test_add_and_recognize(self):
        self.assertEqual(self.recognizer.add_gesture("check", CHECK_MARK), 1)
        self.assertEqual(self.recognizer.gesture_count(), 17)

        result = self.recognizer.recognize(CHECK_MARK)
        self.assertEqual(result.name, "check")
        self.assertEqual(result.score, 1.0)

    def test_variants(self):
        self.assertEqual(self.recognizer.add_gesture("zig", ZIGZAG), 1)
        self.assertEqual(self.recognizer.add_gesture("zig", CHECK_MARK), 2)
        self.assertEqual(self.recognizer.gesture_names().count("zig"), 2)

        # Either variant reports the shared name
        self.assertEqual(self.recognizer.recognize(CHECK_MARK).name, "zig")

    def test_add_then_delete_restores_count(self):
        before = self.recognizer.gesture_count()
        self.recognizer.add_gesture("check", CHECK_MARK)

        self.assertEqual(self.recognizer.delete_gesture("check"), 1)
        self.assertEqual(self.recognizer.gesture_count(), before)

    def test_delete_removes_every_variant(self):
        self.recognizer.add_gesture("line", ZIGZAG)

        self.assertEqual(self.recognizer.delete_gesture("line"), 2)
        self.assertNotIn("line", self.recognizer.gesture_names())
        self.assertEqual(self.recognizer.gesture_count(), 15)

    def test_delete_unknown(self):
        self.assertEqual(self.recognizer.delete_gesture("nope"), 0)
        self.assertEqual(self.recognizer.gesture_count(), 16)

    def test_add_empty_raises(self):
        with self.assertRaises(EmptyGestureError):
            self.recognizer.add_gesture("empty", [])
        self.assertEqual(self.recognizer.gesture_count(), 16)

    def test_add_degenerate_raises(self):
        with self.assertRaises(DegenerateGestureError):
            self.recognizer.add_gesture("dot", [(1, 1, 1), (1, 1, 1)])
        self.assertEqual(self.recognizer.gesture_count(), 16)

    def test_add_non_finite_raises(self):
        for points in (
            [(0, 0, 1), (float("nan"), 5, 1), (10, 10, 1)],
            [(0, 0, 1), (float("inf"), 5, 1)],
            [(0, 0, 1), (1e308, 5, 1), (-1e308, 10, 1)],
        ):
            with self.assertRaises(DegenerateGestureError):
                self.recognizer.add_gesture("bad", points)
        self.assertEqual(self.recognizer.gesture_count(), 16)

    def test_add_malformed_raises(self):
        with self.assertRaises(InvalidSampleError):
            self.recognizer.add_gesture("bad", [(1, 2), {"x": 3}])
        self.assertEqual(self.recognizer.gesture_count(), 16)

    def test_delete_by_index(self):
        self.assertEqual(self.recognizer.delete_gesture_by_index(0), "X")
        self.assertEqual(self.recognizer.gesture_names()[0], "line")
        self.assertIsNone(self.recognizer.delete_gesture_by_index(15))
        self.assertIsNone(self.recognizer.delete_gesture_by_index(-1))
        self.assertEqual(self.recognizer.gesture_count(), 15)

    def test_reset_returns_custom_count(self):
        self.recognizer.add_gesture("check", CHECK_MARK)
        self.recognizer.add_gesture("zig", ZIGZAG)

        self.assertEqual(self.recognizer.reset_to_defaults(), 2)
        self.assertEqual(self.recognizer.gesture_count(), 16)
        self.assertEqual(self.recognizer.gesture_names(), [name for name, _ in DEFAULT_TEMPLATES])

    def test_reset_restores_deleted_defaults(self):
        self.recognizer.delete_gesture("circle")

        self.assertEqual(self.recognizer.reset_to_defaults(), 0)
        self.assertIn("circle", self.recognizer.gesture_names())
        self.assertEqual(self.recognizer.gesture_count(), 16)

    def test_snapshot_is_immutable(self):
        snapshot = self.recognizer.templates()
        self.recognizer.add_gesture("check", CHECK_MARK)

        self.assertEqual(len(snapshot), 16)
        self.assertIsInstance(snapshot, tuple)

    def test_metadata(self):
        self.recognizer.add_gesture("check", CHECK_MARK)
        rows = self.recognizer.metadata()

        self.assertEqual(len(rows), 17)
        self.assertEqual([row.index for row in rows], list(range(17)))
        self.assertTrue(all(row.is_default for row in rows[:16]))
        self.assertFalse(rows[16].is_default)
        self.assertEqual(rows[16].name, "check")
        self.assertTrue(all(row.point_count == 32 and row.is_valid for row in rows))

    def test_statistics(self):
        text = self.recognizer.statistics()
        self.assertTrue(text.startswith("Recognizer: 16 gestures"))
        self.assertIn("[1] line (32 points, valid)", text)

    def test_concurrent_use(self):
        errors = []

        def train(i):
            try:
                self.recognizer.add_gesture(f"zig-{i}", ZIGZAG)
            except Exception as e:  # surfaced below
                errors.append(e)

        def recognize():
            try:
                for _ in range(5):
                    self.recognizer.recognize(LINE)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=train, args=(i,)) for i in range(4)]
        threads += [threading.Thread(target=recognize) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertEqual(self.recognizer.gesture_count(), 20)


class TestResult(unittest.TestCase):
    """Result helpers."""

    def test_formatting(self):
        result = Result("circle", 0.875, 1.234)

        self.assertEqual(result.confidence_percentage, "87.5%")
        self.assertEqual(str(result), "circle (87.5%, 1.2ms)")
        self.assertTrue(result.is_high_confidence())
        self.assertFalse(result.is_high_confidence(0.9))

    def test_no_match(self):
        result = Result.no_match(2.0)

        self.assertEqual(result.name, NO_MATCH)
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.time_ms, 2.0)
        self.assertFalse(result.is_recognized)


if __name__ == '__main__':
    unittest.main()
