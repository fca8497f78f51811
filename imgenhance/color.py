"""
Image Enhancement Module - Colour Conversion Functions

Channel splitting and RGBA <-> HSV conversion for packed RGBA images.

Two HSV encodings are supported:

- integer planes (uint8): hue 0..255 covers 0..360 degrees, saturation and
  value 0..255 cover 0..1 (OpenCV ``*_FULL`` conversions);
- floating-point planes (float64): all three components in [0, 1]
  (scikit-image conversions).

Alpha is never carried through HSV: ``hsv_to_rgba`` writes R, G and B only.
"""

from typing import Tuple

import cv2
import numpy as np
from skimage import color

from .errors import BadArgumentError
from .image import check_image, is_rgba
from .lut import saturate
from .utils.constants import MAX_INTENSITY, RGB_CHANNELS, RGBA_CHANNELS


def _check_rgba(image: np.ndarray) -> None:
    check_image(image)
    if not is_rgba(image):
        raise BadArgumentError(f"expected an (H, W, 4) RGBA image, got shape {image.shape}")


def split_channels(image: np.ndarray, alpha: bool = True) -> Tuple[np.ndarray, ...]:
    """
    Split a packed RGBA image into contiguous uint8 planes.

    Parameters
    ----------
    image : np.ndarray
        RGBA (H, W, 4) uint8 image.
    alpha : bool, optional
        Also return the A plane. Default is True.

    Returns
    -------
    tuple of np.ndarray
        (R, G, B, A) planes, or (R, G, B) when ``alpha`` is False.
    """
    _check_rgba(image)
    count = RGBA_CHANNELS if alpha else RGB_CHANNELS
    return tuple(np.ascontiguousarray(image[..., c]) for c in range(count))


def merge_channels(planes, out: np.ndarray) -> np.ndarray:
    """
    Interleave 3 (R, G, B) or 4 (R, G, B, A) planes back into ``out``.

    With three planes the alpha channel of ``out`` is left untouched.
    """
    _check_rgba(out)
    if len(planes) not in (RGB_CHANNELS, RGBA_CHANNELS):
        raise BadArgumentError(f"expected 3 or 4 planes, got {len(planes)}")

    for c, plane in enumerate(planes):
        if plane.shape != out.shape[:2]:
            raise BadArgumentError(
                f"plane {c} has shape {plane.shape}, expected {out.shape[:2]}"
            )
        out[..., c] = plane
    return out


def rgba_to_hsv(image: np.ndarray, floating: bool = False) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert a packed RGBA image to three planar HSV channels.

    Parameters
    ----------
    image : np.ndarray
        RGBA (H, W, 4) uint8 image. The alpha channel is ignored.
    floating : bool, optional
        Return float64 planes in [0, 1] instead of uint8 planes. Default is False.

    Returns
    -------
    tuple of np.ndarray
        (hue, saturation, value) planes of shape (H, W).

    Examples
    --------
    >>> red = np.array([[[255, 0, 0, 255]]], dtype=np.uint8)
    >>> h, s, v = rgba_to_hsv(red)
    >>> int(h[0, 0]), int(s[0, 0]), int(v[0, 0])
    (0, 255, 255)
    """
    _check_rgba(image)
    rgb = np.ascontiguousarray(image[..., :RGB_CHANNELS])
    dtype = np.float64 if floating else np.uint8

    if image.size == 0:
        empty = np.zeros(image.shape[:2], dtype=dtype)
        return empty, empty.copy(), empty.copy()

    if floating:
        hsv = color.rgb2hsv(rgb)
    else:
        hsv = cv2.cvtColor(rgb, cv2.COLOR_RGB2HSV_FULL)

    return tuple(np.ascontiguousarray(hsv[..., c], dtype=dtype) for c in range(RGB_CHANNELS))


def hsv_to_rgba(hue: np.ndarray, saturation: np.ndarray, value: np.ndarray,
                out: np.ndarray) -> np.ndarray:
    """
    Convert three planar HSV channels back into the RGB part of ``out``.

    The planes must share one encoding: uint8 planes use the integer
    convention, float64 planes the [0, 1] convention. The alpha channel of
    ``out`` is left untouched.

    Parameters
    ----------
    hue, saturation, value : np.ndarray
        HSV planes of shape (H, W).
    out : np.ndarray
        RGBA (H, W, 4) uint8 image receiving the converted colours.

    Returns
    -------
    np.ndarray
        The ``out`` image.
    """
    _check_rgba(out)
    hsv = np.dstack([hue, saturation, value])
    if hsv.shape[:2] != out.shape[:2]:
        raise BadArgumentError(f"HSV planes of shape {hsv.shape[:2]} do not match {out.shape[:2]}")

    if out.size == 0:
        return out

    if hsv.dtype == np.uint8:
        rgb = cv2.cvtColor(np.ascontiguousarray(hsv), cv2.COLOR_HSV2RGB_FULL)
    else:
        rgb = saturate(color.hsv2rgb(hsv.astype(np.float64)) * MAX_INTENSITY)

    out[..., :RGB_CHANNELS] = rgb
    return out


__all__ = [
    'split_channels',
    'merge_channels',
    'rgba_to_hsv',
    'hsv_to_rgba'
]
