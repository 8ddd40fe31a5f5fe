import pytest

from graymap.header import COMMENT


def _pgm_bytes(magic: str, width: int, height: int, precision: int, body: bytes) -> bytes:
    return f'{magic}\n{COMMENT}\n{width} {height}\n{precision}\n'.encode('ascii') + body


@pytest.fixture
def pgm_data():
    return _pgm_bytes


@pytest.fixture
def make_pgm(tmp_path):
    def factory(magic: str, width: int, height: int, precision: int, body: bytes, name: str = 'image.pgm'):
        path = tmp_path / name
        path.write_bytes(_pgm_bytes(magic, width, height, precision, body))
        return path

    return factory
