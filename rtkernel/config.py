"""
config.py - Numeric tolerances and output settings for the kernel

Module constants are shared by every component; ``PpmConfig`` bundles the
settings the PPM encoder accepts per call.

Project: rtkernel
"""

from dataclasses import dataclass
from typing import Final


# Absolute tolerance for approximate float equality (vectors, colors, matrices)
EPSILON: Final[float] = 0.00001

# Fixed nudge applied to a normalized vector whose magnitude misses 1.0
NORMALIZATION_NUDGE: Final[float] = 0.00000000000000017

# Upper bound on single-ulp correction steps after the fixed nudge
MAX_NORMALIZATION_STEPS: Final[int] = 64

# 8-bit channel ceiling used for quantization and the PPM header
MAX_COLOR_VALUE: Final[int] = 255

PPM_MAGIC: Final[str] = "P3"
PPM_MAX_LINE_LENGTH: Final[int] = 70

# Longest text a single pixel can contribute: "255 255 255 "
MIN_PPM_LINE_LENGTH: Final[int] = 12


@dataclass(frozen=True)
class PpmConfig:
    """
    Settings for the plain-text PPM encoder.

    Attributes
    ----------
    max_line_length : int
        Longest allowed physical line in the pixel body, not counting the
        terminating newline (default: 70)
    """
    max_line_length: int = PPM_MAX_LINE_LENGTH

    def __post_init__(self):
        if self.max_line_length < MIN_PPM_LINE_LENGTH:
            raise ValueError(
                f"max_line_length must be at least {MIN_PPM_LINE_LENGTH}, "
                f"got {self.max_line_length}"
            )
