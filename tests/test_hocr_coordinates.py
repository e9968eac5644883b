from __future__ import annotations

import unittest

from text_extraction.contracts import PageMetrics
from text_extraction.coordinates import parse_page_bbox, parse_word_bbox


class TestWordBbox(unittest.TestCase):
    def test_word_bbox_is_origin_plus_size(self) -> None:
        self.assertEqual(parse_word_bbox("bbox 10 20 60 50"), (10, 20, 50, 30))

    def test_word_bbox_uses_first_field_only(self) -> None:
        self.assertEqual(parse_word_bbox("bbox 36 92 96 116; x_wconf 93"), (36, 92, 60, 24))

    def test_malformed_word_bbox_returns_none(self) -> None:
        for title in (None, "", "bbox", "bbox 1 2 3", "bbox 1 2 x 4", "x_wconf 93; bbox 1 2 3 4"):
            with self.subTest(title=title):
                self.assertIsNone(parse_word_bbox(title))


class TestPageBbox(unittest.TestCase):
    def test_page_bbox_reads_second_field_corner(self) -> None:
        self.assertEqual(parse_page_bbox("ignore;bbox 0 0 1000 1500"), PageMetrics(width=1000, height=1500))
        self.assertEqual(
            parse_page_bbox('image "page_001.png"; bbox 0 0 2550 3300; ppageno 0'),
            PageMetrics(width=2550, height=3300),
        )

    def test_page_size_is_corner_not_delta(self) -> None:
        self.assertEqual(parse_page_bbox("x; bbox 100 100 800 900"), PageMetrics(width=800, height=900))

    def test_malformed_page_bbox_returns_none(self) -> None:
        for title in (None, "", "bbox 0 0 10 10", "image x; bbox 0 0 ten 10"):
            with self.subTest(title=title):
                self.assertIsNone(parse_page_bbox(title))


if __name__ == "__main__":
    unittest.main()
