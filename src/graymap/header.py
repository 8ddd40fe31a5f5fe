import re

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from graymap.encoding import MAX_PRECISION
from graymap.errors import FormatError

COMMENT = '# Generated by graymap'

_LEADING_INT = re.compile(rb'\s*([+-]?\d+)')


class EncodingMode(Enum):
    Ascii = 'P2'
    Binary = 'P5'

    @staticmethod
    def from_magic(magic: bytes) -> 'EncodingMode':
        token = magic[:2].decode('ascii', errors='replace')
        for e in EncodingMode:
            if e.value == token:
                return e
        raise FormatError(FormatError.Kind.UnrecognizedMagic, f'Unsupported magic: {token!r}')

    @staticmethod
    def from_name(name: str) -> 'EncodingMode':
        for e in EncodingMode:
            if name.lower() in (e.name.lower(), e.value.lower()):
                return e
        raise ValueError(f'Unknown encoding mode: {name}')


@dataclass
class Header:
    """
    On-disk header layout, one record per line, in this exact order:

        | Magic (P2 / P5) | Comment | Width Height | Precision |

    The comment line is mandatory and its content is ignored.
    """
    mode: EncodingMode
    width: int
    height: int
    precision: int
    comment: str = COMMENT

    @property
    def num_samples(self) -> int:
        return self.width * self.height


def parse_int(record: bytes) -> int:
    """ Parses the leading decimal integer of a record, yielding 0 when there is none """
    match = _LEADING_INT.match(record)
    if match is None:
        return 0
    return int(match.group(1))


def _read_record(stream: BinaryIO, name: str) -> bytes:
    record = stream.readline()
    if not record:
        raise FormatError(FormatError.Kind.TruncatedHeader, f'Stream ended before the {name} record')
    return record


def read_header(stream: BinaryIO) -> Header:
    mode = EncodingMode.from_magic(_read_record(stream, 'magic'))
    comment = _read_record(stream, 'comment')

    dimensions = _read_record(stream, 'dimensions').split(None, 1)
    width = parse_int(dimensions[0]) if dimensions else 0
    height = parse_int(dimensions[1]) if len(dimensions) > 1 else 0

    precision = parse_int(_read_record(stream, 'precision'))

    if width <= 0 or height <= 0:
        raise FormatError(FormatError.Kind.InvalidDimensions, f'Bad image dimensions: {width}x{height}')

    if precision < 1 or precision > MAX_PRECISION:
        raise FormatError(FormatError.Kind.InvalidPrecision,
                          f'Precision must be within [1, {MAX_PRECISION}], got {precision}')

    return Header(mode, width, height, precision, comment.decode('ascii', errors='replace').rstrip('\r\n'))


def write_header(stream: BinaryIO, width: int, height: int, precision: int, mode: EncodingMode):
    stream.write(f'{mode.value}\n{COMMENT}\n{width} {height}\n{precision}\n'.encode('ascii'))
