import sys

from typing import List

from graymap.errors import PgmError
from graymap.header import EncodingMode
from graymap.log import Log
from graymap.params import parse_args
from graymap import pgm


def run(argv: List[str] = None) -> int:
    io_params, sim_params, args = parse_args(argv)
    Log.setup(args)

    mode = EncodingMode.Ascii if io_params.ascii_encoding else EncodingMode.Binary

    try:
        image, source_precision = pgm.load(io_params.filepath)
        Log.info(f'Loaded {io_params.filepath}: {image.width}x{image.height}, precision {source_precision}')
        Log.debug(f'Simulation parameters: {sim_params.as_dict()}')

        precision = io_params.precision if io_params.precision is not None else source_precision
        pgm.save(io_params.outputfilepath, image, precision, mode)
        Log.info(f'Saved {io_params.outputfilepath}: {mode.name}, precision {precision}')
    except PgmError as e:
        Log.error(f'{e}')
        return 1
    except ValueError as e:
        Log.error(f'Bad argument: {e}')
        return 1

    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
