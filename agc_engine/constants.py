"""
Fixed numeric constants of the AGC transfer function.

These values are part of the processor's behavior and are not tunable.
"""

# Added to every divisor that can reach zero (peak level, noise estimate)
EPSILON = 1e-10

# Noise floor adaptation per sample while the signal is below the estimate
NOISE_ADAPT_SPEED = 0.001

# Upward adaptation runs at this fraction of NOISE_ADAPT_SPEED
NOISE_RISE_FACTOR = 0.1

# Weight given to the previous reduction factor when smoothing
NOISE_REDUCTION_SMOOTHING = 0.9

# Square-root curve applied to the raw reduction factor
REDUCTION_CURVE_EXPONENT = 0.5

# Applied attenuation = reduction * REDUCTION_DEPTH + REDUCTION_FLOOR
REDUCTION_DEPTH = 0.7
REDUCTION_FLOOR = 0.3

# Output stage scale factor
OUTPUT_SCALE = 0.01

# Diagnostics are reported every this many input samples
DEFAULT_DIAGNOSTICS_INTERVAL = 1000
