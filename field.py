from sympy import isprime


def reduce(value: int, p: int) -> int:
    """Reduce value into the range [0, p)."""
    return (value % p + p) % p

def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean Algorithm. Returns (g, x, y) with a*x + b*y == g."""
    if b == 0:
        return (a, 1, 0)
    g, x1, y1 = extended_gcd(b, a % b)
    return g, y1, x1 - (a // b) * y1

def mod_inverse(a: int, p: int) -> int:
    """Modular inverse of a modulo p using the Extended Euclidean Algorithm."""
    a = reduce(a, p)
    g, x, _ = extended_gcd(a, p)
    if g != 1:
        raise NotInvertibleError(a, p)
    return reduce(x, p)

def check_modulus(p: int) -> int:
    if not isprime(p):
        raise InvalidModulusError(p)
    return p


class InvalidModulusError(ValueError):
    def __init__(self, p):
        self.p = p
        self.message = f"Modulus {p} is not a prime. Abort."
        super().__init__(self.message)


class NotInvertibleError(ZeroDivisionError):
    def __init__(self, a, p):
        self.a = a
        self.p = p
        self.message = f"No inverse for {a} modulo {p}."
        super().__init__(self.message)
