from enum import Enum
from typing import Iterable

import numpy as np

MAX_PRECISION = 65535


class ByteOrder(Enum):
    # Multi-byte PGM samples are always big endian, whatever the host uses
    BigEndian = '>'
    Default = BigEndian


class Format(Enum):
    u8 = 'B'
    u16 = 'H'

    @property
    def num_bytes(self) -> int:
        return int(self.name[1:]) // 8

    @property
    def max_value(self) -> int:
        return (2 ** int(self.name[1:])) - 1


def check_precision(precision: int):
    if not isinstance(precision, (int, np.integer)) or isinstance(precision, bool):
        raise TypeError(f'Precision must be of type {int.__name__}')

    if precision < 1:
        raise ValueError('Precision must be at least 1')

    if precision > MAX_PRECISION:
        raise ValueError(f'Precision must be at most {MAX_PRECISION}')


def sample_format(precision: int) -> Format:
    check_precision(precision)
    return Format.u8 if precision < 256 else Format.u16


def byte_depth(precision: int) -> int:
    return sample_format(precision).num_bytes


def _dtype(fmt: Format) -> np.dtype:
    return np.dtype(f'{ByteOrder.Default.value}{fmt.value}')


def encode(fmt: Format, values: Iterable[int]) -> bytes:
    raw = np.asarray(values, dtype=np.int64).ravel()
    if raw.size != 0:
        if raw.min() < 0:
            raise ValueError('Value must be at least 0')

        if raw.max() > fmt.max_value:
            raise ValueError(f'Value must be at most {fmt.max_value}')

    return raw.astype(_dtype(fmt)).tobytes()


def decode(fmt: Format, data: bytes) -> np.ndarray:
    if len(data) % fmt.num_bytes != 0:
        raise ValueError(f'Data size {len(data)} is not a multiple of {fmt.num_bytes}')

    return np.frombuffer(data, dtype=_dtype(fmt))
