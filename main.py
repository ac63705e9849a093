import argparse
import logging

from ecc import Point, doubling_steps, find_points
from field import InvalidModulusError, check_modulus

logger = logging.getLogger(__name__)

# === Reference curve: y^2 = x^3 + x + 1 mod 599 ===
DEFAULT_A = 1
DEFAULT_B = 1
DEFAULT_P = 599
DEFAULT_BASE = (5, 1)
# the reference driver doubles for k in 0..=20
DEFAULT_STEPS = 21


def format_point(point: Point) -> str:
    coords = point.coordinates()
    if coords is None:
        return "O"
    return f"({coords[0]}, {coords[1]})"

def build_parser():
    parser = argparse.ArgumentParser(description="Elliptic curve points and iterated doubling over a small prime field")
    parser.add_argument("-a", "--a", type=int, default=DEFAULT_A, help=f"Curve coefficient a (default: {DEFAULT_A})")
    parser.add_argument("-b", "--b", type=int, default=DEFAULT_B, help=f"Curve coefficient b (default: {DEFAULT_B})")
    parser.add_argument("-p", "--prime", type=int, default=DEFAULT_P, help=f"Prime modulus p (default: {DEFAULT_P})")
    parser.add_argument("--base", type=int, nargs=2, metavar=("X", "Y"), default=list(DEFAULT_BASE), help="Base point coordinates (default: 5 1)")
    parser.add_argument("-n", "--steps", type=int, default=DEFAULT_STEPS, help=f"Number of doublings of the base point (default: {DEFAULT_STEPS})")
    parser.add_argument("--list-points", action="store_true", help="Print every point on the curve")
    parser.add_argument("--debug", action="store_true", help="Show debug logging")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.steps < 0:
        parser.error("Number of steps must be non-negative.")
    try:
        p = check_modulus(args.prime)
    except InvalidModulusError as e:
        parser.error(e.message)

    a, b = args.a, args.b
    print(f"=== Elliptic curve y^2 = x^3 + {a}x + {b} mod {p} ===")

    points = find_points(a, b, p)
    print(f"Affine points: {len(points)} (group order {len(points) + 1})")
    if args.list_points:
        for point in points:
            print(format_point(point))
    print()

    base = Point(args.base[0], args.base[1], a, b, p)
    if not base.is_on_curve():
        logger.warning("Base point %s is not on the curve", format_point(base))
    print(f"Base point P: {format_point(base)}")

    steps = doubling_steps(base, args.steps)
    for k, point in enumerate(steps, 1):
        print(f"2^{k} * P = {format_point(point)}")
    if steps:
        print(f"\nLast step: {format_point(steps[-1])}")

if __name__ == "__main__":
    main()
