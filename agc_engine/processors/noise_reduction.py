"""
Noise Reduction Stage

Derives a smoothed attenuation factor from the ratio between a sample's
magnitude and the current noise floor estimate.
"""

from ..constants import (
    EPSILON,
    NOISE_REDUCTION_SMOOTHING,
    REDUCTION_CURVE_EXPONENT,
    REDUCTION_DEPTH,
    REDUCTION_FLOOR,
)


class NoiseReductionStage:
    """
    SNR-driven noise suppressor.

    Features:
    - Reduction factor of 0 at or below the noise floor, approaching 1 well above it
    - Square-root curve for a gentler transition near the threshold
    - Exponential smoothing across samples to avoid zippering
    - Attenuation floor of 0.3 so suppressed samples are never fully muted
    """

    def __init__(self, smoothing: float = NOISE_REDUCTION_SMOOTHING):
        """
        Initialize the noise reduction stage.

        Args:
            smoothing: Weight given to the previous reduction factor
        """
        self.smoothing = smoothing
        self.last_reduction = 1.0

    def compute(self, sample: float, noise_estimate: float) -> float:
        """
        Compute the smoothed reduction factor for one sample.

        Args:
            sample: Sample about to leave the look-ahead window
            noise_estimate: Current noise floor estimate

        Returns:
            float: Reduction factor in [0, 1]
        """
        snr = abs(sample) / (noise_estimate + EPSILON)
        raw_reduction = min(1.0, max(0.0, (snr - 1) / (snr + 1)))

        gentle_reduction = raw_reduction ** REDUCTION_CURVE_EXPONENT

        smoothed_reduction = (
            self.last_reduction * self.smoothing
            + gentle_reduction * (1 - self.smoothing)
        )
        self.last_reduction = smoothed_reduction
        return smoothed_reduction

    @staticmethod
    def attenuation(reduction: float) -> float:
        """Map a reduction factor onto the applied attenuation in [0.3, 1.0]."""
        return reduction * REDUCTION_DEPTH + REDUCTION_FLOOR

    def reset(self) -> None:
        self.last_reduction = 1.0
