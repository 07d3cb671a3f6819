import numpy as np
import pytest

from imagemanip.buffer import RGB, PixelBuffer
from imagemanip.errors import OutOfRangeError


def test_dimensions_follow_array_shape(noise_image):
    assert noise_image.width == 5
    assert noise_image.height == 3
    assert noise_image.size == (5, 3)


def test_get_uses_x_as_column(quad):
    assert quad.get(1, 0) == RGB(200, 100, 50)
    assert quad.get(0, 1) == RGB(0, 0, 0)


def test_set_clamps_channels():
    image = PixelBuffer.blank(2, 2)
    image.set(1, 1, (300, -5, 12.7))
    assert image.get(1, 1) == RGB(255, 0, 12)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)])
def test_out_of_range_access(x, y):
    image = PixelBuffer.blank(2, 2)
    with pytest.raises(OutOfRangeError):
        image.get(x, y)
    with pytest.raises(OutOfRangeError):
        image.set(x, y, (1, 2, 3))


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        PixelBuffer.blank(1, 1).get(1, 0)


def test_blank_fill():
    image = PixelBuffer.blank(3, 2, fill=(1, 2, 3))
    assert all(image.get(x, y) == (1, 2, 3) for x in range(3) for y in range(2))


@pytest.mark.parametrize("shape", [(2, 2), (2, 2, 4), (0, 3, 3), (3, 0, 3)])
def test_rejects_bad_shapes(shape):
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros(shape, dtype=np.uint8))


def test_rejects_non_positive_blank():
    with pytest.raises(ValueError):
        PixelBuffer.blank(0, 4)


def test_float_input_is_truncated_and_clamped():
    image = PixelBuffer(np.array([[[12.9, -3.0, 999.0]]]))
    assert image.get(0, 0) == RGB(12, 0, 255)


def test_constructor_copies_input():
    arr = np.zeros((1, 1, 3), dtype=np.uint8)
    image = PixelBuffer(arr)
    arr[0, 0] = 200
    assert image.get(0, 0) == RGB(0, 0, 0)


def test_pixels_view_is_read_only(quad):
    with pytest.raises(ValueError):
        quad.pixels[0, 0, 0] = 1


def test_copy_and_equality(quad):
    other = quad.copy()
    assert other == quad
    other.set(0, 0, (0, 0, 0))
    assert other != quad
