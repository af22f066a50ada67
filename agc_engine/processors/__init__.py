"""Gain and noise processing stages."""

from .gain_envelope import GainEnvelope, time_constant_to_coeff
from .noise_reduction import NoiseReductionStage

__all__ = ["GainEnvelope", "time_constant_to_coeff", "NoiseReductionStage"]
