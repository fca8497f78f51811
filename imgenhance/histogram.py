"""
Image Enhancement Module - Histogram Functions

Occurrence counts and cumulative distribution of 8-bit grayscale images.
"""

import numpy as np

from .image import check_image
from .utils.constants import LUT_SIZE


def histogram(image: np.ndarray) -> np.ndarray:
    """
    Count the occurrences of every value 0..255 in a grayscale image.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) uint8 image.

    Returns
    -------
    np.ndarray
        int64 array of 256 bins summing to H * W.

    Examples
    --------
    >>> image = np.array([[0, 128], [128, 255]], dtype=np.uint8)
    >>> hist = histogram(image)
    >>> int(hist[0]), int(hist[128]), int(hist[255])
    (1, 2, 1)
    """
    check_image(image, allow_rgba=False)
    return np.bincount(image.ravel(), minlength=LUT_SIZE).astype(np.int64)


def cumulative_histogram(hist: np.ndarray) -> np.ndarray:
    """
    Prefix sums of a histogram (the unnormalised CDF).

    ``cdf[i]`` is the number of samples with value <= i, so the result is
    non-decreasing and its last entry is the pixel count.
    """
    return np.cumsum(np.asarray(hist, dtype=np.int64))


__all__ = [
    'histogram',
    'cumulative_histogram'
]
