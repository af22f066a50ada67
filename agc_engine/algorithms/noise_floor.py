"""
Noise Floor Estimator

Tracks ambient noise magnitude from the undelayed input stream. The
estimate falls toward quieter input quickly and rises toward louder input
ten times more slowly, so transients barely move it.
"""

from ..constants import NOISE_ADAPT_SPEED, NOISE_RISE_FACTOR


class NoiseFloorEstimator:
    """Asymmetric one-pole tracker of the noise floor magnitude."""

    def __init__(self, adapt_speed: float = NOISE_ADAPT_SPEED):
        """
        Initialize the estimator.

        Args:
            adapt_speed: Per-sample blend coefficient when the input is
                below the current estimate
        """
        self.adapt_speed = adapt_speed
        self.rise_speed = adapt_speed * NOISE_RISE_FACTOR
        self.estimate = 0.0

    def update(self, sample: float) -> float:
        """
        Fold one raw sample into the estimate.

        Args:
            sample: Raw input sample

        Returns:
            float: Updated noise estimate
        """
        abs_sample = abs(sample)
        if abs_sample < self.estimate:
            speed = self.adapt_speed
        else:
            speed = self.rise_speed
        self.estimate = self.estimate * (1 - speed) + abs_sample * speed
        return self.estimate

    def reset(self) -> None:
        self.estimate = 0.0
