import argparse
import sys

from environs import Env

from unitmath.domain.angle import angle_type
from unitmath.domain.bool_vector import bool_vector_type
from unitmath.domain.exceptions import UnitMathException
from unitmath.domain.units import Precision, Unit
from unitmath.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

UNIT_CHOICES = {"deg": Unit.DEGREE, "rad": Unit.RADIAN}


def parse_pattern(text: str) -> int:
    """Parse a bit pattern written as a decimal, 0b, 0o or 0x literal."""
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(
            f"Invalid bit pattern {text!r} (e.g. 10, 0b1010, 0xa)"
        ) from None


def run_angle(args: argparse.Namespace) -> str:
    precision = Precision.DOUBLE if args.double else Precision.SINGLE
    angle = angle_type(UNIT_CHOICES[args.unit], precision).from_raw(args.value)
    if args.to is not None:
        angle = angle_type(UNIT_CHOICES[args.to], precision)(angle)
    logger.debug(f"Angle result: {angle!r}")
    return repr(angle)


def run_bits(args: argparse.Namespace) -> str:
    vector = bool_vector_type(args.size).from_packed(parse_pattern(args.pattern))
    logger.debug(f"Packed {args.pattern} into {type(vector).__name__}")
    return (
        f"{vector!r} all={vector.all()} any={vector.any()} none={vector.none()}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitmath", description="Angle conversion and bool vector inspection"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    angle_parser = subparsers.add_parser("angle", help="Build and convert an angle")
    angle_parser.add_argument("value", type=float, help="Raw angle value")
    angle_parser.add_argument(
        "--unit",
        choices=sorted(UNIT_CHOICES),
        default="deg",
        help="Unit the value is expressed in",
    )
    angle_parser.add_argument(
        "--to", choices=sorted(UNIT_CHOICES), help="Unit to convert to"
    )
    angle_parser.add_argument(
        "--double", action="store_true", help="Use double precision"
    )
    angle_parser.set_defaults(handler=run_angle)

    bits_parser = subparsers.add_parser("bits", help="Inspect a packed bool vector")
    bits_parser.add_argument("size", type=int, help="Number of bits")
    bits_parser.add_argument("pattern", help="Packed bits, e.g. 0b1010")
    bits_parser.set_defaults(handler=run_bits)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables before logging is configured
    env = Env()
    env.read_env(".env")
    setup_logging(env)

    try:
        output = args.handler(args)
    except (ValueError, UnitMathException) as e:
        print(f"Error: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
