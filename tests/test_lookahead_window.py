"""
Test suite for the look-ahead window peak tracker.
"""

import unittest
import numpy as np
from scipy.ndimage import maximum_filter1d
from pathlib import Path
import sys

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from agc_engine.algorithms.lookahead_window import LookAheadWindow


class TestLookAheadWindow(unittest.TestCase):
    """Test sliding window max-abs tracking."""

    def setUp(self):
        """Set up test fixtures."""
        self.rng = np.random.default_rng(1234)
        self.window_sizes = [1, 2, 5, 16, 241]

    def test_max_matches_brute_force(self):
        """Test reported peak against brute-force recomputation at every position."""
        for size in self.window_sizes:
            samples = self.rng.uniform(-1.0, 1.0, 600)
            window = LookAheadWindow(size)

            for i, sample in enumerate(samples):
                window.push(sample)
                expected = np.max(np.abs(samples[max(0, i - size + 1):i + 1]))
                self.assertEqual(window.max(), expected,
                                 f"Peak mismatch at position {i} for window size {size}")

    def test_max_matches_maximum_filter(self):
        """Test reported peaks against scipy's sliding maximum filter."""
        for size in self.window_sizes:
            samples = self.rng.normal(0.0, 0.5, 2000)
            window = LookAheadWindow(size)

            peaks = []
            for sample in samples:
                window.push(sample)
                peaks.append(window.max())

            # Trailing window [i - size + 1, i]
            reference = maximum_filter1d(np.abs(samples), size=size,
                                         mode='constant', cval=0.0,
                                         origin=(size - 1) // 2)
            np.testing.assert_array_equal(np.array(peaks), reference)

    def test_repeated_values(self):
        """Test peak tracking on inputs with many repeated sample values."""
        for size in self.window_sizes:
            # Quantized values in {-1.5, -1.0, ..., 1.5} repeat constantly
            samples = self.rng.integers(-3, 4, 1500) / 2.0
            window = LookAheadWindow(size)

            for i, sample in enumerate(samples):
                window.push(sample)
                expected = np.max(np.abs(samples[max(0, i - size + 1):i + 1]))
                self.assertEqual(window.max(), expected,
                                 f"Peak mismatch with repeated values at {i}, size {size}")

    def test_equal_values_evict_oldest_candidate(self):
        """Test eviction when two equal peaks share the window."""
        window = LookAheadWindow(2)
        window.push(0.5)
        window.push(0.5)
        self.assertEqual(list(window.candidates), [0.5, 0.5])

        window.push(0.2)
        self.assertEqual(window.max(), 0.5)
        self.assertEqual(list(window.candidates), [0.5, 0.2])

        window.push(0.1)
        self.assertEqual(window.max(), 0.2)

    def test_opposite_sign_peaks(self):
        """Test that equal magnitudes of opposite sign are both kept as candidates."""
        window = LookAheadWindow(2)
        window.push(-0.5)
        window.push(0.5)
        self.assertEqual(list(window.candidates), [-0.5, 0.5])

        window.push(0.1)
        self.assertEqual(window.max(), 0.5)
        self.assertEqual(list(window.candidates), [0.5, 0.1])

    def test_candidates_non_increasing(self):
        """Test that candidate magnitudes never increase front to back."""
        window = LookAheadWindow(32)
        for sample in self.rng.normal(0.0, 1.0, 1000):
            window.push(sample)
            magnitudes = [abs(c) for c in window.candidates]
            self.assertTrue(all(a >= b for a, b in zip(magnitudes, magnitudes[1:])),
                            "Candidate deque must be non-increasing in magnitude")

    def test_fifo_bounded(self):
        """Test that the FIFO never grows beyond the window size."""
        window = LookAheadWindow(10)
        for i in range(100):
            window.push(float(i))
            self.assertLessEqual(len(window), 10)
        self.assertTrue(window.full)
        self.assertEqual(window.oldest(), 90.0)

    def test_full_flag(self):
        """Test the full property during filling."""
        window = LookAheadWindow(3)
        self.assertFalse(window.full)
        window.push(0.1)
        window.push(0.2)
        self.assertFalse(window.full)
        window.push(0.3)
        self.assertTrue(window.full)
        window.push(0.4)
        self.assertTrue(window.full)

    def test_pop_returns_oldest(self):
        """Test manual eviction."""
        window = LookAheadWindow(4)
        for sample in [0.9, 0.1, 0.3]:
            window.push(sample)

        self.assertEqual(window.pop(), 0.9)
        self.assertEqual(window.max(), 0.3)
        self.assertEqual(len(window), 2)

    def test_empty_window(self):
        """Test that reading the peak of an empty window raises."""
        window = LookAheadWindow(4)
        with self.assertRaises(IndexError):
            window.max()

        window.push(0.5)
        window.clear()
        self.assertEqual(len(window), 0)
        with self.assertRaises(IndexError):
            window.max()


if __name__ == '__main__':
    unittest.main()
