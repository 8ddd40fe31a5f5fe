from enum import Enum


class PgmError(Exception):
    """ Base class for everything the codec raises on bad files or failed I/O """


class IoError(PgmError):
    def __init__(self, path, reason: str):
        super().__init__(f'{path}: {reason}')
        self.path = path
        self.reason = reason


class AllocationError(PgmError):
    def __init__(self, width: int, height: int):
        super().__init__(f'Unable to allocate a {width}x{height} pixel buffer')
        self.width = width
        self.height = height


class FormatError(PgmError):
    class Kind(Enum):
        UnrecognizedMagic = 'unrecognized magic'
        TruncatedHeader = 'truncated header'
        InvalidDimensions = 'invalid dimensions'
        InvalidPrecision = 'invalid precision'
        TruncatedPixelData = 'truncated pixel data'
        PixelCountMismatch = 'pixel count mismatch'
        InvalidSample = 'invalid sample'

    def __init__(self, kind: 'FormatError.Kind', message: str):
        super().__init__(f'{kind.value}: {message}')
        self.kind = kind
        self.message = message
