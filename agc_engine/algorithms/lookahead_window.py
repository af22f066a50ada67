"""
Look-Ahead Window - Sliding Window Peak Tracker

Keeps the most recent raw samples in a FIFO together with a monotonic
deque of peak candidates, so the maximum absolute value over the window
is available in O(1) amortized time per sample.
"""

from collections import deque
from typing import Deque


class LookAheadWindow:
    """
    Fixed-length sliding window with incremental max-abs tracking.

    The candidate deque is kept non-increasing in absolute value from
    front to back, so its front is always the window peak.
    """

    def __init__(self, size: int):
        """
        Initialize the window.

        Args:
            size: Number of samples the window spans
        """
        self.size = size
        self.buffer: Deque[float] = deque()
        self.candidates: Deque[float] = deque()

    def __len__(self) -> int:
        return len(self.buffer)

    @property
    def full(self) -> bool:
        """True once the window holds exactly `size` samples."""
        return self.size > 0 and len(self.buffer) == self.size

    def push(self, sample: float) -> None:
        """
        Append a sample, evicting the oldest one if the window overflows.

        Args:
            sample: Raw input sample
        """
        sample = float(sample)
        self.buffer.append(sample)

        # Smaller candidates can never be the peak while `sample` is in the window
        magnitude = abs(sample)
        while self.candidates and abs(self.candidates[-1]) < magnitude:
            self.candidates.pop()
        self.candidates.append(sample)

        if len(self.buffer) > self.size:
            self.pop()

    def pop(self) -> float:
        """
        Evict the oldest sample from the window.

        The candidate front is dropped when it compares equal to the evicted
        sample. Matching is by value, not by position.

        Returns:
            float: The evicted sample
        """
        sample = self.buffer.popleft()
        if self.candidates and sample == self.candidates[0]:
            self.candidates.popleft()
        return sample

    def oldest(self) -> float:
        """Return the oldest sample still inside the window."""
        return self.buffer[0]

    def max(self) -> float:
        """
        Return the maximum absolute sample value in the window.

        Raises:
            IndexError: If the window is empty
        """
        return abs(self.candidates[0])

    def clear(self) -> None:
        """Drop all buffered samples."""
        self.buffer.clear()
        self.candidates.clear()
