import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def gray_image(rng):
    """Random 32x48 grayscale image with a narrow intensity band."""
    return rng.integers(40, 180, size=(32, 48), dtype=np.uint8)


@pytest.fixture
def rgba_image(rng):
    """Random 32x48 RGBA image with a varying alpha channel."""
    image = rng.integers(30, 200, size=(32, 48, 4), dtype=np.uint8)
    image[..., 3] = rng.integers(100, 256, size=(32, 48), dtype=np.uint8)
    return image


def gray_as_rgba(plane, alpha=255):
    """Pack a grayscale plane into an RGBA image with R = G = B."""
    image = np.empty(plane.shape + (4,), dtype=np.uint8)
    image[..., :3] = plane[..., None]
    image[..., 3] = alpha
    return image
