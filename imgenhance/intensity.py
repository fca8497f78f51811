"""
Image Enhancement Module - Intensity Transformation Functions

Provides brightness, contrast, gamma and histogram operations for 8-bit
grayscale (H, W) and packed RGBA (H, W, 4) images.

Every operator follows the NumPy ``out`` convention:

    result = op(image, ...)             # new array, image untouched
    op(image, ..., out=image)           # in place
    op(image, ..., out=buffer)          # written into a caller buffer

The out-of-place forms are exactly "copy the input, then work in place".
"""

import logging
from typing import Optional

import numpy as np

from .color import hsv_to_rgba, merge_channels, rgba_to_hsv, split_channels
from .errors import BadArgumentError
from .histogram import cumulative_histogram, histogram
from .image import check_image, is_rgba, prepare_output
from .lut import apply_lut, build_lut, identity_lut, saturate
from .utils.constants import MAX_INTENSITY, RGB_CHANNELS, RGBA_CHANNELS

logger = logging.getLogger(__name__)


def adjust(image: np.ndarray, alpha: float, beta: float,
           out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Apply a linear brightness/contrast change.

    Each sample becomes ``saturate(alpha * I + beta)``. For RGBA images the
    same curve is applied to R, G, B and A.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) or RGBA (H, W, 4) uint8 image.
    alpha : float
        Contrast gain. May be negative.
    beta : float
        Brightness offset.
    out : np.ndarray, optional
        Destination buffer. Pass ``out=image`` to work in place.

    Returns
    -------
    np.ndarray
        Adjusted image with the same shape and dtype as input.

    Examples
    --------
    >>> image = np.array([[10, 20], [30, 40]], dtype=np.uint8)
    >>> adjust(image, 2.0, 5).tolist()
    [[25, 45], [65, 85]]
    """
    check_image(image)
    result = prepare_output(image, out)

    table = build_lut(lambda x: alpha * x + beta)
    return apply_lut(result, table)


def _equalize_plane(plane: np.ndarray) -> np.ndarray:
    """Equalize a grayscale plane in place."""
    nb_pixels = plane.size
    if nb_pixels == 0:
        return plane

    hist = histogram(plane)
    cdf = cumulative_histogram(hist)

    # Level 0 is not part of the cdf_min scan and is never remapped
    populated = np.flatnonzero(hist[1:]) + 1
    if populated.size == 0:
        return plane
    min_value = int(populated[0])
    cdf_min = int(cdf[min_value])
    max_value = int(np.flatnonzero(cdf == cdf.max())[-1])

    logger.debug(f"equalize: cdf_min={cdf_min} range=[{min_value}, {max_value}] pixels={nb_pixels}")

    if cdf_min == nb_pixels:
        # At most one populated level above 0: nothing to redistribute
        return plane

    table = identity_lut()
    span = cdf[min_value:max_value + 1]
    table[min_value:max_value + 1] = saturate(
        (span - cdf_min) / float(nb_pixels - cdf_min) * MAX_INTENSITY
    )
    return apply_lut(plane, table)


def equalize_histogram(image: np.ndarray, use_hsv: bool = False,
                       out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Apply global histogram equalization.

    The intensity distribution is spread over the full [0, 255] range so that
    the cumulative histogram becomes as linear as possible. Values below the
    first populated level above 0 pass through unchanged.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) or RGBA (H, W, 4) uint8 image.
    use_hsv : bool, optional
        RGBA only. If True, equalize the value channel in HSV space; otherwise
        equalize R, G and B independently. A is always preserved. Default is False.
    out : np.ndarray, optional
        Destination buffer. Pass ``out=image`` to work in place.

    Returns
    -------
    np.ndarray
        Equalized image with the same shape and dtype as input.

    Examples
    --------
    >>> image = np.array([[0, 128], [128, 255]], dtype=np.uint8)
    >>> equalize_histogram(image).tolist()
    [[0, 0], [0, 255]]
    """
    check_image(image)
    result = prepare_output(image, out)

    if result.size == 0:
        return result

    if not is_rgba(result):
        return _equalize_plane(result)

    if use_hsv:
        hue, saturation, value = rgba_to_hsv(result)
        _equalize_plane(value)
        hsv_to_rgba(hue, saturation, value, out=result)
    else:
        planes = split_channels(result)
        for plane in planes[:RGB_CHANNELS]:
            _equalize_plane(plane)
        merge_channels(planes, out=result)

    return result


def gamma_correction(image: np.ndarray, gamma: float,
                     out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Apply gamma correction.

    Each sample becomes ``saturate(255 * (I / 255) ** (1 / gamma))``, so
    gamma > 1 brightens and gamma < 1 darkens. For RGBA images the same curve
    is applied to R, G, B and A.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) or RGBA (H, W, 4) uint8 image.
    gamma : float
        Gamma value, must be strictly positive.
    out : np.ndarray, optional
        Destination buffer. Pass ``out=image`` to work in place.

    Returns
    -------
    np.ndarray
        Gamma-corrected image with the same shape and dtype as input.

    Raises
    ------
    BadArgumentError
        If ``gamma`` is not positive. Nothing is written in that case.
    """
    check_image(image)
    if not gamma > 0:
        raise BadArgumentError(f"gamma must be positive, got {gamma}")

    result = prepare_output(image, out)
    inverse_gamma = 1.0 / gamma

    table = build_lut(lambda x: np.power(x / MAX_INTENSITY, inverse_gamma) * MAX_INTENSITY)
    return apply_lut(result, table)


def _stretch_table(min_value: int, max_value: int) -> np.ndarray:
    """Linear table mapping [min_value, max_value] onto [0, 255]."""
    table = identity_lut()
    value_range = max_value - min_value
    if value_range > 0:
        levels = np.arange(min_value, max_value + 1)
        table[min_value:max_value + 1] = MAX_INTENSITY * (levels - min_value) // value_range
    return table


def stretch_contrast(image: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Stretch the contrast so the samples cover the full [0, 255] range.

    Samples are mapped linearly (integer division) from [min, max] onto
    [0, 255]. A constant image is left unchanged. For RGBA images each of R, G,
    B and A is stretched with its own extrema.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) or RGBA (H, W, 4) uint8 image.
    out : np.ndarray, optional
        Destination buffer. Pass ``out=image`` to work in place.

    Returns
    -------
    np.ndarray
        Stretched image with the same shape and dtype as input.

    Examples
    --------
    >>> image = np.array([[50, 100, 150, 200]], dtype=np.uint8)
    >>> stretch_contrast(image).tolist()
    [[0, 85, 170, 255]]
    """
    check_image(image)
    result = prepare_output(image, out)

    if result.size == 0:
        return result

    if not is_rgba(result):
        min_value, max_value = int(result.min()), int(result.max())
        logger.debug(f"stretch_contrast: min={min_value} max={max_value}")
        return apply_lut(result, _stretch_table(min_value, max_value))

    pixels = result.reshape(-1, RGBA_CHANNELS)
    minima, maxima = pixels.min(axis=0), pixels.max(axis=0)
    logger.debug(f"stretch_contrast: min={minima.tolist()} max={maxima.tolist()}")

    table = np.stack(
        [_stretch_table(int(lo), int(hi)) for lo, hi in zip(minima, maxima)],
        axis=1
    )
    return apply_lut(result, table)


def _normalize_plane(plane: np.ndarray) -> None:
    """Rescale a float plane in place to [0, 1] when it is not constant."""
    low, high = float(plane.min()), float(plane.max())
    if high - low > 0.0:
        plane -= low
        plane /= high - low


def stretch_contrast_hsv(image: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Stretch the contrast of a colour image in HSV space.

    Saturation and value are each rescaled to span [0, 1]; hue is preserved.
    The alpha channel is left as it was in the input.

    Parameters
    ----------
    image : np.ndarray
        RGBA (H, W, 4) uint8 image.
    out : np.ndarray, optional
        Destination buffer. Pass ``out=image`` to work in place.

    Returns
    -------
    np.ndarray
        Stretched RGBA image.

    Raises
    ------
    BadArgumentError
        If ``image`` is not an RGBA image.
    """
    check_image(image)
    if not is_rgba(image):
        raise BadArgumentError("stretch_contrast_hsv requires an (H, W, 4) RGBA image")

    result = prepare_output(image, out)
    if result.size == 0:
        return result

    hue, saturation, value = rgba_to_hsv(result, floating=True)
    _normalize_plane(saturation)
    _normalize_plane(value)

    return hsv_to_rgba(hue, saturation, value, out=result)


__all__ = [
    'adjust',
    'equalize_histogram',
    'gamma_correction',
    'stretch_contrast',
    'stretch_contrast_hsv'
]
