import argparse
import sys

from pathlib import Path
from typing import List

from PIL import Image as PilImage, UnidentifiedImageError

from graymap.errors import PgmError
from graymap.header import EncodingMode
from graymap.image import Image
from graymap.log import Log
from graymap import pgm


def image_to_pgm(input_file, output_file, precision: int = 255, mode: EncodingMode = EncodingMode.Binary) -> Image:
    with PilImage.open(input_file) as pil_image:
        image = Image.from_pil(pil_image)

    pgm.save(output_file, image, precision, mode)
    return image


def pgm_to_image(input_file, output_file) -> Image:
    image, _ = pgm.load(input_file)
    image.to_pil().save(output_file)
    return image


def convert(input_file: Path, output_file: Path, precision: int, mode: EncodingMode) -> Image:
    if output_file.suffix.lower() == '.pgm':
        return image_to_pgm(input_file, output_file, precision, mode)
    return pgm_to_image(input_file, output_file)


def run(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser('graymap-convert', description='Convert between PGM and other raster formats')
    Log.add_args(parser)
    parser.add_argument('input', type=Path, help='Source image')
    parser.add_argument('output', type=Path, help='Destination image, a .pgm extension selects the graymap writer')
    parser.add_argument('--ascii', '-a', action='store_true', help='Write ASCII (P2) samples')
    parser.add_argument('--precision', '-p', type=int, default=255, help='Maximum sample value of a PGM output')

    args = parser.parse_args(argv)
    Log.setup(args)

    mode = EncodingMode.Ascii if args.ascii else EncodingMode.Binary

    try:
        image = convert(args.input, args.output, args.precision, mode)
    except (PgmError, OSError, UnidentifiedImageError, ValueError) as e:
        Log.error(f'An error occurred: {e}')
        return 1

    Log.info(f'Successfully converted {args.input} to {args.output}')
    Log.info(f'Image dimensions: {image.width}x{image.height}')
    Log.info(f'Total pixels: {image.width * image.height}')
    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
