"""
Image Container Helpers

Images are plain NumPy arrays in row-major order:

    grayscale  (H, W)     uint8
    RGBA       (H, W, 4)  uint8, channels R, G, B, A
    float      (H, W)     float64, intermediate planes only

The helpers here validate layouts and resolve the ``out`` buffer shared by
every operator.
"""

from typing import Optional

import numpy as np

from .errors import BadArgumentError
from .utils.constants import RGBA_CHANNELS


def is_grayscale(image: np.ndarray) -> bool:
    """Return True for a 2D uint8 image."""
    return image.ndim == 2 and image.dtype == np.uint8


def is_rgba(image: np.ndarray) -> bool:
    """Return True for a packed (H, W, 4) uint8 image."""
    return (image.ndim == 3 and image.shape[2] == RGBA_CHANNELS
            and image.dtype == np.uint8)


def check_image(image: np.ndarray, allow_rgba: bool = True) -> None:
    """
    Validate that an array is a supported 8-bit image.

    Parameters
    ----------
    image : np.ndarray
        Candidate image.
    allow_rgba : bool, optional
        Accept packed RGBA images in addition to grayscale. Default is True.

    Raises
    ------
    BadArgumentError
        If the array is not a uint8 grayscale (or RGBA) image.
    """
    if not isinstance(image, np.ndarray):
        raise BadArgumentError(f"image must be a numpy array, got {type(image).__name__}")
    if is_grayscale(image):
        return
    if allow_rgba and is_rgba(image):
        return

    expected = "(H, W) or (H, W, 4) uint8" if allow_rgba else "(H, W) uint8"
    raise BadArgumentError(
        f"image must be a {expected} array, got shape {image.shape} dtype {image.dtype}"
    )


def prepare_output(image: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Resolve the buffer an operator writes into.

    ``out=None`` allocates a copy of ``image``; ``out is image`` works in place;
    any other buffer is overwritten with ``image`` (``out := image``) and its
    prior contents are never read.

    Parameters
    ----------
    image : np.ndarray
        Validated input image.
    out : np.ndarray, optional
        Destination buffer with the same shape and dtype as ``image``.

    Returns
    -------
    np.ndarray
        The buffer holding a copy of ``image``, ready for in-place processing.

    Raises
    ------
    BadArgumentError
        If ``out`` does not match the shape and dtype of ``image``.
    """
    if out is None:
        return image.copy()
    if out is image:
        return out

    if not isinstance(out, np.ndarray) or out.shape != image.shape or out.dtype != image.dtype:
        got = f"shape {out.shape} dtype {out.dtype}" if isinstance(out, np.ndarray) else type(out).__name__
        raise BadArgumentError(
            f"out must match the input image (shape {image.shape} dtype {image.dtype}), got {got}"
        )
    np.copyto(out, image)
    return out


__all__ = [
    'is_grayscale',
    'is_rgba',
    'check_image',
    'prepare_output'
]
