#!/usr/bin/env python3
"""
Tests for tempo normalization.
"""

import unittest

from djuced_sync.core.tempo import normalize_tempo


class TestNormalizeTempo(unittest.TestCase):
    def test_snaps_small_jitter_up_and_down(self) -> None:
        self.assertEqual(normalize_tempo(120.01), 120.0)
        self.assertEqual(normalize_tempo(89.98), 90.0)
        self.assertEqual(normalize_tempo(128.02), 128.0)

    def test_keeps_fractional_tempo(self) -> None:
        self.assertEqual(normalize_tempo(120.05), 120.05)
        self.assertEqual(normalize_tempo(87.5), 87.5)
        self.assertEqual(normalize_tempo(120.5), 120.5)

    def test_integer_tempo_unchanged(self) -> None:
        self.assertEqual(normalize_tempo(174.0), 174.0)

    def test_returns_float(self) -> None:
        self.assertIsInstance(normalize_tempo(120.01), float)

    def test_idempotent(self) -> None:
        for tempo in [120.01, 120.05, 89.98, 87.5, 140.0, 99.971, 0.0]:
            with self.subTest(tempo=tempo):
                once = normalize_tempo(tempo)
                self.assertEqual(normalize_tempo(once), once)

    def test_custom_threshold(self) -> None:
        self.assertEqual(normalize_tempo(120.05, threshold=0.1), 120.0)
        self.assertEqual(normalize_tempo(120.01, threshold=0.0), 120.01)


if __name__ == "__main__":
    unittest.main()
