import logging

import numpy as np
import pytest

from imgenhance import BadArgumentError, gaussian_blur, unsharp_mask

from conftest import gray_as_rgba


class TestGaussianBlur:
    def test_returns_float_plane(self, gray_image):
        blurred = gaussian_blur(gray_image, 5)
        assert blurred.dtype == np.float64
        assert blurred.shape == gray_image.shape

    def test_constant_image_is_unchanged(self):
        flat = np.full((9, 11), 100, dtype=np.uint8)
        assert np.allclose(gaussian_blur(flat, 7), 100.0)

    def test_size_one_is_identity(self, gray_image):
        assert np.allclose(gaussian_blur(gray_image, 1), gray_image)

    def test_smooths_an_impulse(self):
        image = np.zeros((9, 9), dtype=np.uint8)
        image[4, 4] = 255

        blurred = gaussian_blur(image, 5)

        assert blurred[4, 4] < 255
        assert blurred[4, 5] > 0
        assert blurred.sum() == pytest.approx(255.0)

    @pytest.mark.parametrize("size", [0, 2, 4, -3, 3.0])
    def test_rejects_bad_kernel_size(self, gray_image, size):
        with pytest.raises(BadArgumentError):
            gaussian_blur(gray_image, size)

    def test_empty_image(self):
        assert gaussian_blur(np.zeros((0, 0), dtype=np.uint8), 3).shape == (0, 0)


class TestUnsharpMask:
    def test_weight_zero_is_identity(self, gray_image):
        assert np.array_equal(unsharp_mask(gray_image, size=5, weight=0.0), gray_image)

    def test_constant_image_is_unchanged(self):
        flat = np.full((10, 10), 77, dtype=np.uint8)
        assert np.array_equal(unsharp_mask(flat, size=5, weight=0.8), flat)

    def test_matches_formula(self, gray_image):
        weight = 0.5
        blurred = gaussian_blur(gray_image, 5)
        raw = (gray_image - weight * blurred) / (1 - weight)
        expected = np.clip(np.floor(raw + 0.5), 0, 255)

        result = unsharp_mask(gray_image, size=5, weight=weight)

        assert np.array_equal(result, expected.astype(np.uint8))

    def test_increases_edge_contrast(self):
        image = np.full((8, 8), 100, dtype=np.uint8)
        image[:, 4:] = 150

        result = unsharp_mask(image, size=5, weight=0.6)

        assert result[4, 3] < 100
        assert result[4, 4] > 150

    @pytest.mark.parametrize("weight", [1.0, 1.5, -0.1])
    def test_weight_out_of_range_is_skipped(self, gray_image, weight, caplog):
        original = gray_image.copy()

        with caplog.at_level(logging.WARNING, logger="imgenhance.filter"):
            result = unsharp_mask(gray_image, size=5, weight=weight)

        assert np.array_equal(result, original)
        assert "unsharp_mask skipped" in caplog.text

    def test_skip_still_fills_out_buffer(self, gray_image):
        out = np.zeros_like(gray_image)
        unsharp_mask(gray_image, size=3, weight=1.5, out=out)
        assert np.array_equal(out, gray_image)

    def test_rgba_keeps_alpha(self, rgba_image):
        result = unsharp_mask(rgba_image, size=5, weight=0.5)

        assert np.array_equal(result[..., 3], rgba_image[..., 3])
        assert not np.array_equal(result[..., :3], rgba_image[..., :3])

    def test_rgba_channels_match_grayscale(self, rgba_image):
        result = unsharp_mask(rgba_image, size=3, weight=0.4)

        for c in range(3):
            plane = np.ascontiguousarray(rgba_image[..., c])
            assert np.array_equal(result[..., c], unsharp_mask(plane, size=3, weight=0.4))

    def test_gray_rgba_equals_grayscale(self, gray_image):
        result = unsharp_mask(gray_as_rgba(gray_image, alpha=10), size=5, weight=0.3)
        expected = unsharp_mask(gray_image, size=5, weight=0.3)

        assert np.array_equal(result[..., 0], expected)
        assert np.all(result[..., 3] == 10)

    def test_rejects_even_kernel_before_writing(self, gray_image):
        original = gray_image.copy()
        with pytest.raises(BadArgumentError):
            unsharp_mask(gray_image, size=4, weight=0.5, out=gray_image)
        assert np.array_equal(gray_image, original)
