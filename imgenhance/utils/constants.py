"""
Image Enhancement Constants Module

Centralized location for the numeric constants shared by the enhancement
operators. Users can adjust the defaults for their own pipelines.

Usage
-----
    from imgenhance.utils.constants import LUT_SIZE, MAX_INTENSITY

    identity = np.arange(LUT_SIZE, dtype=np.uint8)
"""

# =============================================================================
# 8-bit Sample Range
# =============================================================================

# Number of entries in a look-up table (one per 8-bit value)
LUT_SIZE: int = 256

# Largest displayable 8-bit sample value
MAX_INTENSITY: int = 255

# Channels of a packed RGBA image (R, G, B, A)
RGBA_CHANNELS: int = 4

# Channels carried through colour space conversions (R, G, B)
RGB_CHANNELS: int = 3


# =============================================================================
# Gaussian Blur / Unsharp Mask Defaults
# =============================================================================

# sigma = (size - 1) / DEFAULT_SIGMA_DIVISOR when no sigma is given,
# so the kernel spans +/- 3 sigma
DEFAULT_SIGMA_DIVISOR: float = 6.0

# Kernel size (odd) used by unsharp_mask when none is given
DEFAULT_UNSHARP_SIZE: int = 7

# Weight in [0, 1) used by unsharp_mask when none is given
DEFAULT_UNSHARP_WEIGHT: float = 0.6
