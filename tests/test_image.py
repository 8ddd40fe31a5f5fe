import numpy as np
import pytest

from PIL import Image as PilImage

from graymap.errors import AllocationError
from graymap.image import Image


def test_default_buffer_is_black():
    image = Image(3, 2)
    assert len(image.buffer) == 6
    assert not image.buffer.any()


def test_buffer_length_must_match():
    with pytest.raises(ValueError):
        Image(2, 2, [0.0, 1.0, 0.5])


def test_negative_dimensions():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_buffer_is_copied():
    samples = np.array([0.0, 1.0])
    image = Image(2, 1, samples)
    samples[0] = 0.75

    assert image.buffer[0] == 0.0


def test_rows():
    image = Image.from_rows([[0.0, 0.25, 0.5], [0.75, 1.0, 0.0]])

    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 1) == 0.75
    assert image.as_rows().shape == (2, 3)


def test_from_rows_needs_a_grid():
    with pytest.raises(ValueError):
        Image.from_rows([0.0, 1.0])


def test_pixel_out_of_bounds():
    with pytest.raises(IndexError):
        Image(2, 2).pixel(2, 0)


def test_blank():
    assert Image.blank(2, 2, 0.5) == Image(2, 2, [0.5] * 4)


def test_isclose():
    image = Image(2, 1, [0.5, 0.5])
    assert image.isclose(Image(2, 1, [0.501, 0.499]), 0.01)
    assert not image.isclose(Image(2, 1, [0.6, 0.5]), 0.01)
    assert not image.isclose(Image(1, 2, [0.5, 0.5]), 0.01)


def test_pil_round_trip():
    pil_image = PilImage.new('L', (4, 3), color=51)
    image = Image.from_pil(pil_image)

    assert (image.width, image.height) == (4, 3)
    np.testing.assert_allclose(image.buffer, 0.2)

    converted = image.to_pil()
    assert converted.mode == 'L'
    assert converted.size == (4, 3)
    assert converted.getpixel((3, 2)) == 51


def test_from_color_pil_image():
    image = Image.from_pil(PilImage.new('RGB', (2, 2), color=(255, 255, 255)))
    np.testing.assert_allclose(image.buffer, 1.0)


def test_from_sixteen_bit_pil_image():
    image = Image.from_pil(PilImage.new('I;16', (2, 1), color=65535))
    np.testing.assert_allclose(image.buffer, 1.0)


def test_impossible_allocation():
    with pytest.raises(AllocationError):
        Image._allocate(2 ** 40, 2 ** 40)

    with pytest.raises(AllocationError):
        Image(2 ** 40, 2 ** 40)
