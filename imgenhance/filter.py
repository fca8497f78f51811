"""
Image Enhancement Module - Spatial Filtering Functions

Provides Gaussian blurring and unsharp-mask sharpening for 8-bit images.
Blurred planes are float64 intermediates released before the operator returns.
"""

import logging
from typing import Optional

import cv2
import numpy as np

from .color import split_channels
from .errors import BadArgumentError
from .image import check_image, is_rgba, prepare_output
from .lut import saturate
from .utils.constants import (
    DEFAULT_SIGMA_DIVISOR,
    DEFAULT_UNSHARP_SIZE,
    DEFAULT_UNSHARP_WEIGHT,
)

logger = logging.getLogger(__name__)


def _check_kernel_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise BadArgumentError(f"kernel size must be an integer, got {size!r}")
    if size < 1 or size % 2 == 0:
        raise BadArgumentError(f"kernel size must be odd and >= 1, got {size}")


def gaussian_blur(image: np.ndarray, size: int, sigma: Optional[float] = None) -> np.ndarray:
    """
    Convolve a grayscale image with a separable Gaussian kernel.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) uint8 image.
    size : int
        Kernel size, odd and >= 1.
    sigma : float, optional
        Standard deviation of the kernel. Default is ``(size - 1) / 6`` so the
        kernel spans +/- 3 sigma.

    Returns
    -------
    np.ndarray
        Blurred float64 image of shape (H, W). Borders are reflected
        (``cv2.BORDER_REFLECT_101``).

    Raises
    ------
    BadArgumentError
        If ``size`` is not an odd positive integer.

    Examples
    --------
    >>> flat = np.full((5, 5), 100, dtype=np.uint8)
    >>> round(float(gaussian_blur(flat, 3)[2, 2]), 6)
    100.0
    """
    _check_kernel_size(size)
    check_image(image, allow_rgba=False)

    if sigma is None:
        sigma = (size - 1) / DEFAULT_SIGMA_DIVISOR

    if image.size == 0:
        return np.zeros(image.shape, dtype=np.float64)

    return cv2.GaussianBlur(
        image.astype(np.float64), (int(size), int(size)),
        sigmaX=sigma, sigmaY=sigma,
        borderType=cv2.BORDER_REFLECT_101
    )


def _sharpen_plane(plane: np.ndarray, size: int, weight: float) -> np.ndarray:
    blurred = gaussian_blur(plane, size)
    return saturate((plane - weight * blurred) / (1.0 - weight))


def unsharp_mask(image: np.ndarray, size: int = DEFAULT_UNSHARP_SIZE,
                 weight: float = DEFAULT_UNSHARP_WEIGHT,
                 out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Sharpen an image with the unsharp mask technique.

    Each sample becomes ``saturate((I - weight * blur(I)) / (1 - weight))``,
    i.e. the image plus its high-pass (I - blur(I)) with a total gain of
    ``1 / (1 - weight)``.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) or RGBA (H, W, 4) uint8 image. For RGBA only R, G and
        B are sharpened, A is copied unchanged.
    size : int, optional
        Odd Gaussian kernel size. Default is 7.
    weight : float, optional
        Sharpening weight in [0, 1). Default is 0.6. A weight outside this
        range leaves the image unchanged.
    out : np.ndarray, optional
        Destination buffer. Pass ``out=image`` to work in place. By default a
        new array is returned.

    Returns
    -------
    np.ndarray
        Sharpened image with the same shape and dtype as input.

    Examples
    --------
    >>> image = np.random.randint(0, 256, (64, 64), dtype=np.uint8)
    >>> sharpened = unsharp_mask(image, size=5, weight=0.5)
    >>> unsharp_mask(image, weight=1.5).tolist() == image.tolist()
    True
    """
    check_image(image)
    _check_kernel_size(size)
    result = prepare_output(image, out)

    if not 0.0 <= weight < 1.0:
        logger.warning(f"unsharp_mask skipped: weight {weight} is outside [0, 1)")
        return result

    if result.size == 0:
        return result

    if is_rgba(result):
        for c, plane in enumerate(split_channels(result, alpha=False)):
            result[..., c] = _sharpen_plane(plane, size, weight)
    else:
        result[...] = _sharpen_plane(result, size, weight)

    return result


__all__ = [
    'gaussian_blur',
    'unsharp_mask'
]
