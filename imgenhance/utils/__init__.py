"""
Utils package - Shared constants for the image enhancement operators.
"""

from .constants import (
    LUT_SIZE,
    MAX_INTENSITY,
    RGBA_CHANNELS,
    RGB_CHANNELS,
    DEFAULT_SIGMA_DIVISOR,
    DEFAULT_UNSHARP_SIZE,
    DEFAULT_UNSHARP_WEIGHT,
)

__all__ = [
    # 8-bit range
    "LUT_SIZE",
    "MAX_INTENSITY",
    "RGBA_CHANNELS",
    "RGB_CHANNELS",
    # Blur defaults
    "DEFAULT_SIGMA_DIVISOR",
    "DEFAULT_UNSHARP_SIZE",
    "DEFAULT_UNSHARP_WEIGHT",
]
