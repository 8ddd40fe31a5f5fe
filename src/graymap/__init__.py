from graymap.errors import PgmError, IoError, AllocationError, FormatError
from graymap.header import EncodingMode, Header
from graymap.image import Image
from graymap.pgm import load, save
