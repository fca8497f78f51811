"""
Image Enhancement Module

Point-wise and histogram-based enhancement of 8-bit grayscale and RGBA images.
Images are NumPy arrays: (H, W) uint8 for grayscale, (H, W, 4) uint8 for RGBA.

Usage:
    from imgenhance import adjust, equalize_histogram, unsharp_mask

    # Brightness / contrast, returns a new image
    brighter = adjust(image, alpha=1.2, beta=10)

    # Histogram equalization on the HSV value channel, in place
    equalize_histogram(rgba, use_hsv=True, out=rgba)

    # Sharpen
    sharpened = unsharp_mask(image, size=5, weight=0.5)
"""

import logging

from .errors import BadArgumentError

from .lut import (
    saturate,
    identity_lut,
    build_lut,
    apply_lut
)

from .histogram import (
    histogram,
    cumulative_histogram
)

from .color import (
    split_channels,
    merge_channels,
    rgba_to_hsv,
    hsv_to_rgba
)

from .filter import (
    gaussian_blur,
    unsharp_mask
)

from .intensity import (
    adjust,
    equalize_histogram,
    gamma_correction,
    stretch_contrast,
    stretch_contrast_hsv
)

__all__ = [
    # Errors
    'BadArgumentError',
    # Look-up tables
    'saturate',
    'identity_lut',
    'build_lut',
    'apply_lut',
    # Histogram
    'histogram',
    'cumulative_histogram',
    # Colour conversion
    'split_channels',
    'merge_channels',
    'rgba_to_hsv',
    'hsv_to_rgba',
    # Filtering
    'gaussian_blur',
    'unsharp_mask',
    # Intensity
    'adjust',
    'equalize_histogram',
    'gamma_correction',
    'stretch_contrast',
    'stretch_contrast_hsv'
]

__version__ = '1.0.0'

# Records reach the application only once it configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
