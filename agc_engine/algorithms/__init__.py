"""Signal tracking algorithms."""

from .lookahead_window import LookAheadWindow
from .noise_floor import NoiseFloorEstimator

__all__ = ["LookAheadWindow", "NoiseFloorEstimator"]
