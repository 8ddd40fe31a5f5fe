import logging

import pytest

from graymap import cli, pgm
from graymap.header import COMMENT, EncodingMode
from graymap.image import Image


@pytest.fixture
def source(tmp_path):
    path = tmp_path / 'source.pgm'
    pgm.save(path, Image(2, 2, [0.0, 0.25, 0.5, 1.0]), 255, EncodingMode.Binary)
    return path


def test_reencodes_as_ascii(tmp_path, source):
    output = tmp_path / 'output.pgm'

    assert cli.run(['-f', str(source), '-o', str(output), '-a']) == 0
    assert output.read_bytes() == f'P2\n{COMMENT}\n2 2\n255\n0\n64\n128\n255\n'.encode('ascii')


def test_keeps_binary_and_precision_by_default(tmp_path, source):
    output = tmp_path / 'output.pgm'

    assert cli.run(['-f', str(source), '-o', str(output), '-n', '10']) == 0
    assert output.read_bytes() == source.read_bytes()


def test_precision_override(tmp_path, source):
    output = tmp_path / 'output.pgm'

    assert cli.run(['-f', str(source), '-o', str(output), '-p', '1000']) == 0

    image, precision = pgm.load(output)
    assert precision == 1000
    assert image.isclose(pgm.load(source)[0], 1 / 255)


def test_bad_precision_override(tmp_path, source):
    assert cli.run(['-f', str(source), '-o', str(tmp_path / 'output.pgm'), '-p', '0']) == 1


def test_missing_input(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger='graymap'):
        assert cli.run(['-f', str(tmp_path / 'missing.pgm'), '-o', str(tmp_path / 'output.pgm')]) == 1
    assert 'missing.pgm' in caplog.text


def test_broken_input(tmp_path):
    broken = tmp_path / 'broken.pgm'
    broken.write_bytes(b'P6\n# c\n1 1\n255\n\x00\x00\x00')

    assert cli.run(['-f', str(broken), '-o', str(tmp_path / 'output.pgm')]) == 1
    assert not (tmp_path / 'output.pgm').exists()


def test_oversized_input(tmp_path):
    oversized = tmp_path / 'oversized.pgm'
    oversized.write_bytes(b'P5\n# c\n3000000000 3000000000\n65535\n\x00\x00')

    assert cli.run(['-f', str(oversized), '-o', str(tmp_path / 'output.pgm')]) == 1
