#!/usr/bin/env python3
"""
Basic Usage Example - AGC Engine

Runs a quiet tone followed by a loud burst and silence through the AGC
and prints how the gain and noise floor respond.
"""

import logging
import sys
from pathlib import Path

import numpy as np

# Add the parent directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from agc_engine import AGCConfig, AGCProcessor, LoggingDiagnostics
from agc_engine.utils.signals import noisy_tone, silence


def main():
    """Basic usage demonstration."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    print("AGC Engine - Basic Usage Example")
    print("=" * 50)

    config = AGCConfig(
        desired_level=1.0,        # Target peak amplitude
        attack_time_ms=10.0,      # Fast gain reduction
        release_time_ms=100.0,    # Slower recovery
        look_ahead_time_ms=5.0,   # 240 samples at 48kHz
        sample_rate=48000.0,
        diagnostics_interval=12000
    )
    agc = AGCProcessor.from_config(config, diagnostics=LoggingDiagnostics())

    sr = int(config.sample_rate)
    segments = [
        ("quiet tone", noisy_tone(440.0, 0.05, 0.002, sr, config.sample_rate, seed=1)),
        ("loud tone", noisy_tone(440.0, 0.8, 0.002, sr // 2, config.sample_rate, seed=2)),
        ("silence", silence(sr // 2))
    ]

    for name, audio in segments:
        agc.process(audio)
        stats = agc.get_stats()
        print(f"{name:>12}: output peak={np.max(np.abs(audio)):.5f}  "
              f"gain={stats['gain']:.3f}  noise={stats['noise_estimate']:.5f}  "
              f"reduction={stats['last_noise_reduction']:.3f}")

    print()
    print(f"Latency: {agc.latency_samples} samples ({agc.get_stats()['latency_ms']:.1f} ms)")


if __name__ == "__main__":
    main()
