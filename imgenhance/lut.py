"""
Image Enhancement Module - Look-Up Table Engine

Saturating cast to the 8-bit range and 256-entry look-up tables applied
through OpenCV. Every point-wise operator builds its table in full before
calling apply_lut, so reads never observe partially written samples.
"""

from typing import Callable, Union

import cv2
import numpy as np

from .errors import BadArgumentError
from .image import check_image, is_rgba
from .utils.constants import LUT_SIZE, MAX_INTENSITY, RGBA_CHANNELS


def saturate(value: Union[float, np.ndarray]) -> Union[int, np.ndarray]:
    """
    Round and clamp real values to the displayable 8-bit range.

    Rounding is half away from zero and NaN maps to 0.

    Parameters
    ----------
    value : float or np.ndarray
        Scalar or array of real values.

    Returns
    -------
    int or np.ndarray
        An int for scalar input, otherwise a uint8 array of the same shape.

    Examples
    --------
    >>> saturate(127.5)
    128
    >>> saturate(np.array([-3.0, 300.0, np.nan]))
    array([  0, 255,   0], dtype=uint8)
    """
    values = np.asarray(value, dtype=np.float64)
    rounded = np.sign(values) * np.floor(np.abs(values) + 0.5)
    rounded = np.nan_to_num(rounded, nan=0.0)
    result = np.clip(rounded, 0, MAX_INTENSITY).astype(np.uint8)

    if result.ndim == 0:
        return int(result)
    return result


def identity_lut() -> np.ndarray:
    """Return the uint8 table mapping every value to itself."""
    return np.arange(LUT_SIZE, dtype=np.uint8)


def build_lut(curve: Callable[[np.ndarray], np.ndarray]) -> np.ndarray:
    """
    Evaluate a tone curve on every 8-bit value and saturate the result.

    Parameters
    ----------
    curve : callable
        Vectorised function of the float64 array ``[0, 1, ..., 255]``.

    Returns
    -------
    np.ndarray
        uint8 table of 256 entries.

    Examples
    --------
    >>> table = build_lut(lambda x: 2.0 * x + 5)
    >>> int(table[10]), int(table[200])
    (25, 255)
    """
    levels = np.arange(LUT_SIZE, dtype=np.float64)
    values = np.broadcast_to(np.asarray(curve(levels), dtype=np.float64), levels.shape)
    return saturate(values)


def _check_table(image: np.ndarray, table: np.ndarray) -> None:
    if table.dtype != np.uint8:
        raise BadArgumentError(f"table must be uint8, got {table.dtype}")
    if table.shape == (LUT_SIZE,):
        return
    if table.shape == (LUT_SIZE, RGBA_CHANNELS) and is_rgba(image):
        return
    raise BadArgumentError(
        f"table must have shape ({LUT_SIZE},) or ({LUT_SIZE}, {RGBA_CHANNELS}) "
        f"for RGBA images, got {table.shape}"
    )


def apply_lut(image: np.ndarray, table: np.ndarray) -> np.ndarray:
    """
    Replace every sample of an image, in place, by its table entry.

    A (256,) table is applied to every channel. For RGBA images a (256, 4)
    table holds one curve per channel: ``R' = table[R, 0]``, ``G' = table[G, 1]``
    and so on.

    Parameters
    ----------
    image : np.ndarray
        Grayscale (H, W) or RGBA (H, W, 4) uint8 image, modified in place.
    table : np.ndarray
        uint8 look-up table of shape (256,) or (256, 4).

    Returns
    -------
    np.ndarray
        The same ``image`` object.

    Raises
    ------
    BadArgumentError
        If the image layout or the table shape is not supported.
    """
    check_image(image)
    table = np.asarray(table)
    _check_table(image, table)

    if image.size == 0:
        return image

    if table.ndim == 2:
        # One 4-channel table entry per value, matching the RGBA source
        lut = np.ascontiguousarray(table.reshape(1, LUT_SIZE, RGBA_CHANNELS))
    else:
        lut = np.ascontiguousarray(table)

    image[...] = cv2.LUT(np.ascontiguousarray(image), lut)
    return image


__all__ = [
    'saturate',
    'identity_lut',
    'build_lut',
    'apply_lut'
]
