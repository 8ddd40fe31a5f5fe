import os

from typing import Tuple, Union

from graymap.encoding import check_precision
from graymap.errors import IoError
from graymap.header import EncodingMode, read_header, write_header
from graymap.image import Image
from graymap.log import Log
from graymap.pixels import read_ascii, read_binary, write_ascii, write_binary

PathLike = Union[str, os.PathLike]

_readers = {
    EncodingMode.Ascii: read_ascii,
    EncodingMode.Binary: read_binary,
}

_writers = {
    EncodingMode.Ascii: write_ascii,
    EncodingMode.Binary: write_binary,
}


def load(filepath: PathLike) -> Tuple[Image, int]:
    """
    Reads a P2 or P5 graymap.

    Returns the image, with samples normalized by the file precision, together with that precision.
    Raises IoError when the file can't be read, and FormatError when its contents can't be decoded.
    """
    try:
        with open(filepath, 'rb') as f:
            header = read_header(f)
            Log.debug(f'{filepath}: {header.mode.value} {header.width}x{header.height}, precision {header.precision}')
            samples = _readers[header.mode](f, header)
    except OSError as e:
        raise IoError(filepath, e.strerror or str(e)) from e

    return Image(header.width, header.height, samples), header.precision


def save(filepath: PathLike, image: Image, precision: int, mode: Union[EncodingMode, str] = EncodingMode.Binary):
    """
    Writes the image as a P2 (ASCII) or P5 (binary) graymap with the given precision.

    Samples are rounded half to even after scaling, and clamped to [0, precision].
    A failed write leaves the target file in an unspecified state.
    """
    check_precision(precision)
    if not isinstance(mode, EncodingMode):
        mode = EncodingMode.from_name(mode)

    try:
        with open(filepath, 'wb') as f:
            write_header(f, image.width, image.height, precision, mode)
            _writers[mode](f, image, precision)
    except OSError as e:
        raise IoError(filepath, e.strerror or str(e)) from e

    Log.debug(f'{filepath}: wrote {mode.value} {image.width}x{image.height}, precision {precision}')
