"""
Test signal generators for exercising the AGC.

All generators return mono float64 numpy arrays.
"""

import numpy as np


def sine_wave(
    frequency: float,
    amplitude: float,
    num_samples: int,
    sample_rate: float = 48000.0,
    phase: float = 0.0
) -> np.ndarray:
    """
    Generate a sine wave.

    Args:
        frequency: Frequency in Hz
        amplitude: Peak amplitude
        num_samples: Length in samples
        sample_rate: Sample rate in Hz
        phase: Initial phase in radians

    Returns:
        np.ndarray: Sine wave [samples]
    """
    t = np.arange(num_samples) / sample_rate
    return amplitude * np.sin(2 * np.pi * frequency * t + phase)


def dc_signal(amplitude: float, num_samples: int) -> np.ndarray:
    """Constant signal at the given amplitude."""
    return np.full(num_samples, float(amplitude))


def silence(num_samples: int) -> np.ndarray:
    return np.zeros(num_samples)


def noisy_tone(
    frequency: float,
    amplitude: float,
    noise_level: float,
    num_samples: int,
    sample_rate: float = 48000.0,
    seed: int = 0
) -> np.ndarray:
    """
    Sine wave with additive Gaussian noise.

    Args:
        frequency: Tone frequency in Hz
        amplitude: Tone peak amplitude
        noise_level: Standard deviation of the noise
        num_samples: Length in samples
        sample_rate: Sample rate in Hz
        seed: Random seed for reproducibility

    Returns:
        np.ndarray: Noisy tone [samples]
    """
    rng = np.random.default_rng(seed)
    tone = sine_wave(frequency, amplitude, num_samples, sample_rate)
    return tone + rng.normal(0.0, noise_level, num_samples)
