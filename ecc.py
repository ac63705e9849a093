# ecc.py

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional

from field import check_modulus, mod_inverse, reduce

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A point on y^2 = x^3 + a*x + b over F_p.

    Affine points keep x and y reduced into [0, p). The point at infinity
    has x = y = None and still carries the curve parameters.
    """
    x: Optional[int]
    y: Optional[int]
    a: int
    b: int
    p: int

    def __post_init__(self):
        if (self.x is None) != (self.y is None):
            raise ValueError("Both coordinates must be given, or neither for the point at infinity")
        if self.x is not None:
            object.__setattr__(self, "x", reduce(self.x, self.p))
            object.__setattr__(self, "y", reduce(self.y, self.p))

    @classmethod
    def infinity(cls, a: int, b: int, p: int) -> "Point":
        return cls(None, None, a, b, p)

    @property
    def is_infinity(self) -> bool:
        return self.x is None

    def is_on_curve(self) -> bool:
        if self.is_infinity:
            return True
        left = (self.y * self.y) % self.p
        right = (self.x ** 3 + self.a * self.x + self.b) % self.p
        return left == right

    def coordinates(self) -> Optional[tuple[int, int]]:
        if self.is_infinity:
            return None
        assert 0 <= self.x < self.p, f"x = {self.x} outside [0, {self.p})"
        assert 0 <= self.y < self.p, f"y = {self.y} outside [0, {self.p})"
        return self.x, self.y

    def same_curve(self, other: "Point") -> bool:
        return (self.a, self.b, self.p) == (other.a, other.b, other.p)

    def __add__(self, other: "Point") -> "Point":
        return add_points(self, other)

    def __neg__(self) -> "Point":
        if self.is_infinity:
            return self
        return self.__class__(self.x, -self.y, self.a, self.b, self.p)

    def __rmul__(self, coef: int) -> "Point":
        if coef < 0:
            raise ValueError("Negative scalars are not supported")
        result = self.infinity(self.a, self.b, self.p)
        addend = self

        while coef:
            if coef & 1:
                result += addend
            addend += addend
            coef >>= 1

        return result

    def __repr__(self):
        if self.is_infinity:
            return "Point(infinity)"
        return f"Point({self.x}, {self.y})"


def add_points(P: Point, Q: Point) -> Point:
    """Group law. The order of the checks matters: the vertical line case
    must be handled before a slope is computed."""
    if not P.same_curve(Q):
        raise CurveMismatchError(P, Q)

    if P.is_infinity:
        return Q
    if Q.is_infinity:
        return P

    a, p = P.a, P.p
    x1, y1 = P.x, P.y
    x2, y2 = Q.x, Q.y

    # Vertical line: inverse pair, or doubling a point with y = 0
    if x1 == x2 and (y1 + y2) % p == 0:
        return Point.infinity(a, P.b, p)

    if x1 == x2 and y1 == y2:
        lam = ((3 * x1 * x1 + a) * mod_inverse(2 * y1, p)) % p
    else:
        lam = ((y2 - y1) * mod_inverse(x2 - x1, p)) % p

    x3 = reduce(lam * lam - x1 - x2, p)
    y3 = reduce(lam * (x1 - x3) - y1, p)
    return Point(x3, y3, a, P.b, p)


def iter_points(a: int, b: int, p: int) -> Iterator[Point]:
    """Yield every affine point of the curve, by increasing x then y."""
    check_modulus(p)
    for x in range(p):
        rhs = (x ** 3 + a * x + b) % p
        for y in range(p):
            if (y * y) % p == rhs:
                yield Point(x, y, a, b, p)


def find_points(a: int, b: int, p: int) -> List[Point]:
    """Brute-force enumeration of the affine points, O(p^2)."""
    points = list(iter_points(a, b, p))
    logger.debug("Found %d affine points on y^2 = x^3 + %dx + %d mod %d", len(points), a, b, p)
    return points


def curve_order(a: int, b: int, p: int) -> int:
    # affine points plus the point at infinity
    return len(find_points(a, b, p)) + 1


def doubling_steps(base: Point, iterations: int) -> List[Point]:
    """Repeatedly double base: returns [2P, 4P, ..., 2^iterations * P].

    This is iterated doubling, not scalar multiplication by 1..iterations.
    """
    if iterations < 0:
        raise ValueError(f"Number of iterations must be non-negative, got {iterations}")
    check_modulus(base.p)

    steps = []
    point = base
    for k in range(1, iterations + 1):
        point = point + point
        logger.debug("2^%d * P = %s", k, point)
        steps.append(point)
    return steps


def point_order(P: Point) -> Optional[int]:
    """Find the order of point P on the curve."""
    # Hasse: #E <= p + 1 + 2*sqrt(p)
    bound = P.p + 1 + 2 * (math.isqrt(P.p) + 1)
    point = P
    for i in range(1, bound + 1):
        if point.is_infinity:
            return i
        point += P
    return None


class CurveMismatchError(TypeError):
    def __init__(self, P, Q):
        self.message = (
            f"Points are not on the same curve: "
            f"(a={P.a}, b={P.b}, p={P.p}) vs (a={Q.a}, b={Q.b}, p={Q.p})"
        )
        super().__init__(self.message)


# Example usage
if __name__ == "__main__":
    # Define curve: y^2 = x^3 + 2x + 2 over F_17
    p = 17
    a = 2
    b = 2

    # Base point
    G = Point(5, 1, a, b, p)

    print("Points on the curve:")
    print(find_points(a, b, p))
    print(f"Order of {G}: {point_order(G)}")
    for k in range(1, 6):
        print(f"{k} * G = {k * G}")
