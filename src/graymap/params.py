import argparse

from dataclasses import dataclass, asdict
from typing import List, Optional, Tuple

from graymap.log import Log


@dataclass
class IoParams:
    filepath: str
    outputfilepath: str = 'output.pgm'
    ascii_encoding: bool = False
    precision: Optional[int] = None

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser):
        parser.add_argument('--input', '-f', dest='filepath', required=True, type=str, help='Source image path')
        parser.add_argument('--output', '-o', dest='outputfilepath', default='output.pgm', type=str,
                            help='Destination image path')
        parser.add_argument('--ascii', '-a', dest='ascii_encoding', action='store_true',
                            help='Write ASCII (P2) samples instead of binary (P5) ones')
        parser.add_argument('--precision', '-p', type=int,
                            help='Maximum sample value of the output. The source precision is kept if not set.')

    @staticmethod
    def from_args(args) -> 'IoParams':
        return IoParams(args.filepath, args.outputfilepath, args.ascii_encoding, args.precision)


@dataclass
class SimParams:
    """ Erosion simulation settings. Carried along, but never interpreted by the codec. """
    n: int = 70000
    ttl: int = 30
    radius: int = 2
    inertia: float = 0.1
    capacity: float = 10.0
    gravity: float = 4.0
    evaporation: float = 0.1
    erosion: float = 0.1
    deposition: float = 1.0
    min_slope: float = 0.0001

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser):
        defaults = SimParams()
        group = parser.add_argument_group('simulation')
        group.add_argument('-n', dest='n', type=int, default=defaults.n, help='Number of particles')
        group.add_argument('-t', dest='ttl', type=int, default=defaults.ttl, help='Particle time to live')
        group.add_argument('-r', dest='radius', type=int, default=defaults.radius, help='Erosion radius')
        group.add_argument('-e', dest='inertia', type=float, default=defaults.inertia, help='Particle inertia')
        group.add_argument('-c', dest='capacity', type=float, default=defaults.capacity,
                           help='Sediment capacity')
        group.add_argument('-g', dest='gravity', type=float, default=defaults.gravity, help='Gravity')
        group.add_argument('-v', dest='evaporation', type=float, default=defaults.evaporation,
                           help='Evaporation rate')
        group.add_argument('-s', dest='erosion', type=float, default=defaults.erosion, help='Erosion rate')
        group.add_argument('-d', dest='deposition', type=float, default=defaults.deposition,
                           help='Deposition rate')
        group.add_argument('-m', dest='min_slope', type=float, default=defaults.min_slope, help='Minimum slope')

    @staticmethod
    def from_args(args) -> 'SimParams':
        return SimParams(args.n, args.ttl, args.radius, args.inertia, args.capacity, args.gravity,
                         args.evaporation, args.erosion, args.deposition, args.min_slope)

    def as_dict(self) -> dict:
        return asdict(self)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser('graymap', description='Load a graymap and store it with the chosen encoding')

    Log.add_args(parser)
    IoParams.add_arguments(parser)
    SimParams.add_arguments(parser)

    return parser


def parse_args(argv: List[str] = None) -> Tuple[IoParams, SimParams, argparse.Namespace]:
    args = make_parser().parse_args(argv)
    return IoParams.from_args(args), SimParams.from_args(args), args
