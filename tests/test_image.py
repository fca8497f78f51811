import numpy as np
import pytest

from imgenhance import BadArgumentError
from imgenhance.image import check_image, is_grayscale, is_rgba, prepare_output


def test_layout_predicates(gray_image, rgba_image):
    assert is_grayscale(gray_image)
    assert not is_rgba(gray_image)
    assert is_rgba(rgba_image)
    assert not is_grayscale(rgba_image)


def test_check_image_accepts_supported_layouts(gray_image, rgba_image):
    check_image(gray_image)
    check_image(rgba_image)
    check_image(gray_image, allow_rgba=False)


def test_check_image_rejects_rgba_when_disallowed(rgba_image):
    with pytest.raises(BadArgumentError, match=r"\(H, W\) uint8"):
        check_image(rgba_image, allow_rgba=False)


def test_check_image_rejects_lists():
    with pytest.raises(BadArgumentError):
        check_image([[1, 2], [3, 4]])


def test_prepare_output_allocates_copy(gray_image):
    result = prepare_output(gray_image)
    assert result is not gray_image
    assert np.array_equal(result, gray_image)


def test_prepare_output_in_place(gray_image):
    assert prepare_output(gray_image, gray_image) is gray_image


def test_prepare_output_overwrites_buffer(rgba_image):
    out = np.full_like(rgba_image, 255)
    assert prepare_output(rgba_image, out) is out
    assert np.array_equal(out, rgba_image)


def test_prepare_output_rejects_wrong_dtype(gray_image):
    with pytest.raises(BadArgumentError):
        prepare_output(gray_image, gray_image.astype(np.float64))


def test_bad_argument_is_value_error():
    assert issubclass(BadArgumentError, ValueError)
