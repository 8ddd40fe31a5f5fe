from typing import BinaryIO

import numpy as np

from graymap.encoding import decode, encode, sample_format
from graymap.errors import AllocationError, FormatError
from graymap.header import Header
from graymap.image import Image
from graymap.log import Log


def read_ascii(stream: BinaryIO, header: Header) -> np.ndarray:
    tokens = stream.read().split()
    if len(tokens) != header.num_samples:
        raise FormatError(FormatError.Kind.PixelCountMismatch,
                          f'Expected {header.num_samples} samples, got {len(tokens)}')

    try:
        raw = np.array([int(x) for x in tokens], dtype=np.float64)
    except ValueError as e:
        raise FormatError(FormatError.Kind.InvalidSample, str(e)) from e
    except MemoryError as e:
        raise AllocationError(header.width, header.height) from e

    return raw / header.precision


def read_binary(stream: BinaryIO, header: Header) -> np.ndarray:
    fmt = sample_format(header.precision)
    expected = header.num_samples * fmt.num_bytes
    try:
        data = stream.read(expected)
    except (OverflowError, MemoryError) as e:
        raise AllocationError(header.width, header.height) from e

    if len(data) != expected:
        raise FormatError(FormatError.Kind.TruncatedPixelData, f'Expected {expected} bytes, got {len(data)}')

    if stream.read(1):
        Log.debug('Ignoring data after the pixel grid')

    raw = decode(fmt, data)
    return raw.astype(np.float64) / header.precision


def quantize(buffer: np.ndarray, precision: int) -> np.ndarray:
    """
    Scales normalized samples to [0, precision] integers.
    Rounds half to even, and clamps anything outside of [0.0, 1.0] to the closest bound.
    """
    scaled = np.rint(np.asarray(buffer, dtype=np.float64) * precision)
    return np.clip(np.nan_to_num(scaled, nan=0.0), 0, precision).astype(np.int64)


def write_ascii(stream: BinaryIO, image: Image, precision: int):
    raw = quantize(image.buffer, precision)
    stream.write(''.join(f'{x}\n' for x in raw.tolist()).encode('ascii'))


def write_binary(stream: BinaryIO, image: Image, precision: int):
    raw = quantize(image.buffer, precision)
    stream.write(encode(sample_format(precision), raw))
