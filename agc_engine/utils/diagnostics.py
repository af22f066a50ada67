"""
Diagnostic sinks for the AGC processor.

A sink is any callable taking `(sample_index, noise_estimate, noise_reduction)`.
The processor calls it periodically while in steady state and never
depends on its result.
"""

import logging
from typing import Callable, List, NamedTuple, Optional

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[int, float, float], None]


class DiagnosticReport(NamedTuple):
    sample_index: int
    noise_estimate: float
    noise_reduction: float


class LoggingDiagnostics:
    """Route periodic noise diagnostics through the logging module."""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        """
        Initialize the sink.

        Args:
            log: Logger to write to (defaults to this module's logger)
            level: Logging level for each report
        """
        self.log = log or logger
        self.level = level

    def __call__(self, sample_index: int, noise_estimate: float, noise_reduction: float) -> None:
        self.log.log(
            self.level,
            "Noise estimate: %f - Noise Reduction: %f",
            noise_estimate,
            noise_reduction
        )


class DiagnosticsRecorder:
    """Collect diagnostic reports in memory, e.g. for tests or offline analysis."""

    def __init__(self):
        self.reports: List[DiagnosticReport] = []

    def __call__(self, sample_index: int, noise_estimate: float, noise_reduction: float) -> None:
        self.reports.append(DiagnosticReport(sample_index, noise_estimate, noise_reduction))

    def clear(self) -> None:
        self.reports.clear()
