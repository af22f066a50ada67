"""
AGC configuration.

The processor itself never validates its inputs; callers that want
checked construction go through `AGCConfig.validate()` and
`AGCProcessor.from_config()`.
"""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from ..constants import DEFAULT_DIAGNOSTICS_INTERVAL


class AGCConfigError(ValueError):
    """Raised when an AGC configuration is unusable."""


@dataclass
class AGCConfig:
    """Configuration for the AGC processor"""
    desired_level: float = 1.0
    attack_time_ms: float = 10.0
    release_time_ms: float = 100.0
    look_ahead_time_ms: float = 5.0
    sample_rate: float = 48000.0
    diagnostics_interval: int = DEFAULT_DIAGNOSTICS_INTERVAL

    @property
    def look_ahead_samples(self) -> int:
        return look_ahead_to_samples(self.look_ahead_time_ms, self.sample_rate)

    def validate(self) -> "AGCConfig":
        """
        Check that every parameter is usable.

        Returns:
            AGCConfig: self, for chaining

        Raises:
            AGCConfigError: If a parameter is missing, non-finite or out of range
        """
        for name in ("desired_level", "attack_time_ms", "release_time_ms",
                     "look_ahead_time_ms", "sample_rate"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise AGCConfigError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise AGCConfigError(f"{name} must be a finite positive number, got {value}")

        if isinstance(self.diagnostics_interval, bool) or not isinstance(self.diagnostics_interval, int):
            raise AGCConfigError(
                f"diagnostics_interval must be an integer, got {self.diagnostics_interval!r}"
            )
        if self.diagnostics_interval < 1:
            raise AGCConfigError(
                f"diagnostics_interval must be at least 1, got {self.diagnostics_interval}"
            )

        return self

    def to_dict(self) -> Dict[str, Any]:
        """Export the constructor parameters as a plain dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AGCConfig":
        """
        Build a config from a plain dict, e.g. one produced by a caller-side loader.

        Raises:
            AGCConfigError: If the dict carries unknown keys
        """
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise AGCConfigError(f"Unknown AGC config keys: {unknown}. Supported keys: {sorted(allowed)}")
        return cls(**data)


def look_ahead_to_samples(look_ahead_time_ms: float, sample_rate: float) -> int:
    """Number of look-ahead samples for a duration in ms, rounding halves up."""
    return int(math.floor(look_ahead_time_ms * sample_rate / 1000.0 + 0.5))
