"""Utility components."""

from .config import AGCConfig, AGCConfigError
from .diagnostics import LoggingDiagnostics, DiagnosticsRecorder
from .signals import sine_wave, dc_signal, silence, noisy_tone

__all__ = [
    "AGCConfig",
    "AGCConfigError",
    "LoggingDiagnostics",
    "DiagnosticsRecorder",
    "sine_wave",
    "dc_signal",
    "silence",
    "noisy_tone"
]
