from typing import Sequence

import numpy as np
from PIL import Image as PilImage

from graymap.errors import AllocationError


class Image:
    """
    A grayscale image with samples normalized to [0.0, 1.0].
    The buffer is a flat row-major float64 array of exactly width * height samples, owned by the image.
    """

    def __init__(self, width: int, height: int, buffer: Sequence[float] = None):
        if width < 0 or height < 0:
            raise ValueError(f'Image dimensions must not be negative: {width}x{height}')

        self.width = width
        self.height = height

        if buffer is None:
            self.buffer = Image._allocate(width, height)
        else:
            # Always copy, so no caller keeps an alias to our samples
            try:
                self.buffer = np.array(buffer, dtype=np.float64).ravel()
            except (MemoryError, OverflowError) as e:
                raise AllocationError(width, height) from e

        if len(self.buffer) != width * height:
            raise ValueError(f'Buffer holds {len(self.buffer)} samples, expected {width * height}')

    @staticmethod
    def _allocate(width: int, height: int, value: float = 0.0) -> np.ndarray:
        try:
            return np.full(width * height, value, dtype=np.float64)
        except (MemoryError, OverflowError, ValueError) as e:
            raise AllocationError(width, height) from e

    @staticmethod
    def blank(width: int, height: int, value: float = 0.0) -> 'Image':
        image = Image(width, height)
        image.buffer.fill(value)
        return image

    @staticmethod
    def from_rows(rows: Sequence[Sequence[float]]) -> 'Image':
        array = np.array(rows, dtype=np.float64)
        if array.ndim != 2:
            raise ValueError('Rows must form a two-dimensional grid')

        height, width = array.shape
        return Image(width, height, array)

    @staticmethod
    def from_pil(pil_image: PilImage.Image) -> 'Image':
        if pil_image.mode in ('I;16', 'I;16B', 'I'):
            samples = np.array(pil_image, dtype=np.float64) / 65535.0
        else:
            samples = np.array(pil_image.convert('L'), dtype=np.float64) / 255.0

        width, height = pil_image.size
        return Image(width, height, np.clip(samples, 0.0, 1.0))

    def to_pil(self) -> PilImage.Image:
        raw = np.clip(np.rint(self.buffer * 255.0), 0, 255).astype(np.uint8)
        return PilImage.fromarray(raw.reshape(self.height, self.width))

    def as_rows(self) -> np.ndarray:
        return self.buffer.reshape(self.height, self.width)

    def pixel(self, x: int, y: int) -> float:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f'Pixel ({x}, {y}) is outside of a {self.width}x{self.height} image')
        return float(self.buffer[y * self.width + x])

    def isclose(self, other: 'Image', tolerance: float) -> bool:
        if (self.width, self.height) != (other.width, other.height):
            return False
        return bool(np.all(np.abs(self.buffer - other.buffer) <= tolerance))

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and np.array_equal(self.buffer, other.buffer)

    def __repr__(self):
        return f'Image({self.width}x{self.height})'
