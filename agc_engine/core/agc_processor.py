"""
AGCProcessor - Streaming Automatic Gain Control

Normalizes signal loudness toward a target peak level while suppressing
low-level noise. A look-ahead peak detector keeps the gain envelope from
overshooting, and an adaptive noise floor scales down noise-dominated
samples.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import numpy as np
import torch

from ..algorithms.lookahead_window import LookAheadWindow
from ..algorithms.noise_floor import NoiseFloorEstimator
from ..constants import DEFAULT_DIAGNOSTICS_INTERVAL, OUTPUT_SCALE
from ..processors.gain_envelope import GainEnvelope
from ..processors.noise_reduction import NoiseReductionStage
from ..utils.config import AGCConfig, look_ahead_to_samples
from ..utils.diagnostics import DiagnosticSink

logger = logging.getLogger(__name__)

AudioBuffer = Union[np.ndarray, torch.Tensor, List[float]]


class AGCProcessor:
    """
    Single-channel streaming AGC with look-ahead and noise reduction.

    Features:
    - Sliding-window peak detection over the look-ahead span
    - Attack/release gain envelope toward desired_level / peak
    - Asymmetric noise floor tracking on the undelayed input
    - Smoothed SNR-based noise attenuation with a 0.3x floor
    - In-place processing of numpy arrays, CPU torch tensors and lists

    Output is delayed by `look_ahead_samples`; the first `look_ahead_samples`
    outputs after construction or `reset()` are exactly 0.
    """

    def __init__(
        self,
        desired_level: float,
        attack_time_ms: float,
        release_time_ms: float,
        look_ahead_time_ms: float,
        sample_rate: float,
        diagnostics: Optional[DiagnosticSink] = None,
        diagnostics_interval: int = DEFAULT_DIAGNOSTICS_INTERVAL
    ):
        """
        Initialize the AGC processor.

        Inputs are not validated; use `from_config` with a validated
        `AGCConfig` for checked construction.

        Args:
            desired_level: Target peak amplitude
            attack_time_ms: Gain reduction time constant in milliseconds
            release_time_ms: Gain recovery time constant in milliseconds
            look_ahead_time_ms: Look-ahead duration in milliseconds
            sample_rate: Sample rate in Hz
            diagnostics: Optional sink receiving periodic noise reports
            diagnostics_interval: Report every this many input samples
        """
        self.desired_level = desired_level
        self.sample_rate = sample_rate
        self.look_ahead_samples = look_ahead_to_samples(look_ahead_time_ms, sample_rate)

        self.envelope = GainEnvelope(desired_level, attack_time_ms, release_time_ms, sample_rate)
        self.noise_floor = NoiseFloorEstimator()
        self.noise_reduction = NoiseReductionStage()

        # The window spans the sample being emitted plus the look-ahead samples
        self.window = LookAheadWindow(self.look_ahead_samples + 1)

        self.diagnostics = diagnostics
        self.diagnostics_interval = diagnostics_interval
        self.samples_processed = 0

        logger.info(
            "AGCProcessor initialized: desired_level=%.4f, look_ahead=%d samples, "
            "attack_coeff=%.6f, release_coeff=%.6f, sample_rate=%.0fHz",
            desired_level, self.look_ahead_samples,
            self.attack_coeff, self.release_coeff, sample_rate
        )

    @classmethod
    def from_config(
        cls,
        config: AGCConfig,
        diagnostics: Optional[DiagnosticSink] = None
    ) -> "AGCProcessor":
        """
        Build a processor from a validated configuration.

        Raises:
            AGCConfigError: If the configuration is invalid
        """
        config.validate()
        return cls(
            desired_level=config.desired_level,
            attack_time_ms=config.attack_time_ms,
            release_time_ms=config.release_time_ms,
            look_ahead_time_ms=config.look_ahead_time_ms,
            sample_rate=config.sample_rate,
            diagnostics=diagnostics,
            diagnostics_interval=config.diagnostics_interval
        )

    @property
    def gain(self) -> float:
        return self.envelope.gain

    @property
    def attack_coeff(self) -> float:
        return self.envelope.attack_coeff

    @property
    def release_coeff(self) -> float:
        return self.envelope.release_coeff

    @property
    def noise_estimate(self) -> float:
        return self.noise_floor.estimate

    @property
    def last_noise_reduction(self) -> float:
        return self.noise_reduction.last_reduction

    @property
    def latency_samples(self) -> int:
        """Fixed delay between an input sample and its processed output."""
        return self.look_ahead_samples

    def process(self, buffer: AudioBuffer, length: Optional[int] = None) -> None:
        """
        Process audio in place.

        Args:
            buffer: Mono audio as a 1-D float numpy array, CPU torch tensor or list
            length: Number of leading samples to process (default: all)

        Raises:
            TypeError: If the buffer type cannot be written in place
            ValueError: If length exceeds the buffer size
        """
        samples = self._writable_samples(buffer)

        if length is None:
            length = len(samples)
        if length < 0 or length > len(samples):
            raise ValueError(f"length must be between 0 and {len(samples)}, got {length}")

        if isinstance(samples, np.ndarray):
            inputs = samples[:length].tolist()
        else:
            inputs = samples[:length]

        outputs = [self._process_sample(sample) for sample in inputs]
        samples[:length] = outputs

    def apply(self, audio: AudioBuffer) -> AudioBuffer:
        """
        Process a copy of the audio and return it, leaving the input untouched.

        Args:
            audio: Mono audio as a 1-D float numpy array, CPU torch tensor or list

        Returns:
            Processed audio of the same type and length
        """
        if isinstance(audio, torch.Tensor):
            processed = audio.detach().clone()
        elif isinstance(audio, np.ndarray):
            processed = audio.copy()
        else:
            processed = list(audio)
        self.process(processed)
        return processed

    def _process_sample(self, sample: float) -> float:
        """Push one input sample and return the output for the delayed sample."""
        sample_index = self.samples_processed
        self.samples_processed += 1

        self.window.push(sample)
        self.noise_floor.update(sample)

        if not self.window.full:
            return 0.0

        current_sample = self.window.oldest()
        peak = self.window.max()

        gain = self.envelope.update(peak)

        reduction = self.noise_reduction.compute(current_sample, self.noise_floor.estimate)
        reduced_sample = current_sample * NoiseReductionStage.attenuation(reduction)

        if self.diagnostics is not None and sample_index % self.diagnostics_interval == 0:
            self.diagnostics(sample_index, self.noise_floor.estimate, reduction)

        return reduced_sample * gain * OUTPUT_SCALE

    @staticmethod
    def _writable_samples(buffer: AudioBuffer):
        """Return an indexable view that writes through to the caller's buffer."""
        if isinstance(buffer, torch.Tensor):
            if buffer.device.type != "cpu":
                raise TypeError(f"Only CPU tensors can be processed in place, got device {buffer.device}")
            if buffer.requires_grad:
                raise TypeError("Tensors requiring grad cannot be processed in place")
            if not buffer.is_floating_point():
                raise TypeError(f"Expected a floating point tensor, got {buffer.dtype}")
            if buffer.dim() != 1:
                raise TypeError(f"Expected mono audio [samples], got shape {tuple(buffer.shape)}")
            return buffer.numpy()

        if isinstance(buffer, np.ndarray):
            if not np.issubdtype(buffer.dtype, np.floating):
                raise TypeError(f"Expected a floating point array, got {buffer.dtype}")
            if buffer.ndim != 1:
                raise TypeError(f"Expected mono audio [samples], got shape {buffer.shape}")
            if not buffer.flags.writeable:
                raise TypeError("Read-only arrays cannot be processed in place")
            return buffer

        if isinstance(buffer, list):
            return buffer

        raise TypeError(f"Unsupported buffer type: {type(buffer).__name__}")

    def reset(self) -> None:
        """Clear transient state; coefficients and look-ahead length are kept."""
        self.envelope.reset()
        self.window.clear()
        self.noise_floor.reset()
        self.noise_reduction.reset()
        self.samples_processed = 0
        logger.debug("AGCProcessor state reset")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get a snapshot of the processor state.

        Returns:
            dict: Current gain, noise state and fixed timing parameters
        """
        return {
            "gain": self.gain,
            "noise_estimate": self.noise_estimate,
            "last_noise_reduction": self.last_noise_reduction,
            "samples_processed": self.samples_processed,
            "latency_samples": self.latency_samples,
            "latency_ms": 1000.0 * self.latency_samples / self.sample_rate,
            "attack_coeff": self.attack_coeff,
            "release_coeff": self.release_coeff
        }
