"""
Gain Envelope Controller

Converts the look-ahead peak into a target gain and tracks it with
asymmetric attack/release time constants.
"""

import numpy as np

from ..constants import EPSILON


def time_constant_to_coeff(time_ms: float, sample_rate: float) -> float:
    """
    Convert a time constant to a per-sample one-pole smoothing coefficient.

    Degenerate inputs (zero or negative times, zero sample rate) are not
    rejected; they yield saturated or non-finite coefficients.

    Args:
        time_ms: Time constant in milliseconds
        sample_rate: Sample rate in Hz

    Returns:
        float: Coefficient `1 - exp(-1 / (tau * sample_rate))`
    """
    tau_samples = np.float64(time_ms) * 0.001 * np.float64(sample_rate)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        coeff = 1.0 - np.exp(-1.0 / tau_samples)
    return float(coeff)


class GainEnvelope:
    """Attack/release envelope follower steering gain toward desired_level / peak."""

    def __init__(
        self,
        desired_level: float,
        attack_time_ms: float,
        release_time_ms: float,
        sample_rate: float
    ):
        """
        Initialize the envelope.

        Args:
            desired_level: Target peak amplitude
            attack_time_ms: Time constant used when gain must fall
            release_time_ms: Time constant used when gain may rise
            sample_rate: Sample rate in Hz
        """
        self.desired_level = desired_level
        self.attack_coeff = time_constant_to_coeff(attack_time_ms, sample_rate)
        self.release_coeff = time_constant_to_coeff(release_time_ms, sample_rate)
        self.gain = 1.0

    def target_gain(self, peak: float) -> float:
        """Gain that would bring `peak` exactly to the desired level."""
        return self.desired_level / (peak + EPSILON)

    def update(self, peak: float) -> float:
        """
        Move the gain one step toward the target for the given peak.

        Args:
            peak: Maximum absolute sample value in the look-ahead window

        Returns:
            float: Updated gain
        """
        desired_gain = self.target_gain(peak)

        if desired_gain < self.gain:
            # Louder signal ahead: pull gain down with the fast attack
            self.gain = self.gain - self.attack_coeff * (self.gain - desired_gain)
        else:
            self.gain = self.gain + self.release_coeff * (desired_gain - self.gain)

        return self.gain

    def reset(self) -> None:
        self.gain = 1.0
