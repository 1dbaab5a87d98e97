from toyrsa.constants import U64_MAX, ZERO_MODULUS_MSG
from toyrsa.errors import error


def check_u64(name: str, value: int) -> None:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name}={value} is outside the unsigned 64-bit range")


def modexp(x: int, y: int, m: int) -> int:
    """
    Compute x^y mod m by recursive binary exponentiation.

    0^y is 0 for every y (including 0), and x^0 is 1 for every x != 0,
    even when m is 1. A zero modulus is fatal.
    """
    check_u64("x", x)
    check_u64("y", y)
    check_u64("m", m)

    if m == 0:
        error(ZERO_MODULUS_MSG)
    elif x == 0:
        return 0
    elif y == 0:
        return 1

    z = modexp(x, y // 2, m)

    z = (z * z) % m
    if y % 2 == 1:
        z = (z * x) % m
    return z


def gcd(x: int, y: int) -> int:
    """Greatest common divisor. Argument order does not matter."""
    check_u64("x", x)
    check_u64("y", y)

    while y != 0:
        if y < x:
            return gcd(y, x)
        if x == 0:
            return y
        y %= x
    return x


def lcm(x: int, y: int) -> int:
    check_u64("x", x)
    check_u64("y", y)

    if x == 0 or y == 0:
        return 0
    # divide first so the product stays exact
    return x // gcd(x, y) * y


def modinv(a: int, m: int) -> int:
    """
    Modular inverse of a under m, via the extended Euclidean algorithm.

    Returns x in [0, m) with (a * x) % m == 1.
    Raises ValueError if m is 0 or a has no inverse modulo m.
    """
    check_u64("a", a)
    check_u64("m", m)

    if m == 0:
        raise ValueError("modulus must be positive")
    if m == 1:
        return 0
    if gcd(a, m) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")

    m0 = m
    a %= m
    x, y = 1, 0

    while a > 1:
        q = a // m
        a, m = m, a % m
        x, y = y, x - q * y

    if x < 0:
        x += m0
    return x
