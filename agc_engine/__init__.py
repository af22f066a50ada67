"""
AGC Engine: Streaming Automatic Gain Control

A look-ahead automatic gain control processor for mono audio that
normalizes loudness toward a target peak level while suppressing
low-level noise.
"""

from .core.agc_processor import AGCProcessor
from .algorithms.lookahead_window import LookAheadWindow
from .algorithms.noise_floor import NoiseFloorEstimator
from .processors.gain_envelope import GainEnvelope, time_constant_to_coeff
from .processors.noise_reduction import NoiseReductionStage
from .utils.config import AGCConfig, AGCConfigError
from .utils.diagnostics import LoggingDiagnostics, DiagnosticsRecorder
from .constants import (
    EPSILON,
    NOISE_ADAPT_SPEED,
    NOISE_REDUCTION_SMOOTHING,
    OUTPUT_SCALE,
    REDUCTION_DEPTH,
    REDUCTION_FLOOR,
)

__version__ = "1.0.0"

__all__ = [
    "AGCProcessor",
    "LookAheadWindow",
    "NoiseFloorEstimator",
    "GainEnvelope",
    "time_constant_to_coeff",
    "NoiseReductionStage",
    "AGCConfig",
    "AGCConfigError",
    "LoggingDiagnostics",
    "DiagnosticsRecorder",
    "EPSILON",
    "NOISE_ADAPT_SPEED",
    "NOISE_REDUCTION_SMOOTHING",
    "OUTPUT_SCALE",
    "REDUCTION_DEPTH",
    "REDUCTION_FLOOR",
]
