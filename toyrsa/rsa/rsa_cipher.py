import random

from toyrsa.arith.modular import gcd, lcm, modexp, modinv
from toyrsa.arith.primality import primality
from toyrsa.constants import PRIME_HIGH, PRIME_LOW, PUBLIC_EXPONENT


def GeneratePrime(rng=None) -> int:
    """
    Draw from [2^30, 2^31) until a prime comes up.

    There is no attempt limit; the loop relies on the density of primes
    in that range.
    """
    if rng is None:
        rng = random.Random()

    while True:
        candidate = rng.randrange(PRIME_LOW, PRIME_HIGH)
        if primality(candidate):
            return candidate


def GenerateKeys(rng=None):
    if rng is None:
        rng = random.Random()

    p = GeneratePrime(rng)
    q = GeneratePrime(rng)

    e = PUBLIC_EXPONENT
    lam = lcm(p - 1, q - 1)

    # redraw only when both hold; with primes near 2^30, e < lam almost always
    while e >= lam and gcd(e, lam) != 1:
        q = GeneratePrime(rng)
        lam = lcm(p - 1, q - 1)

    return p, q


def Encrypt(message: int, rng=None, verbose: bool = True):
    p, q = GenerateKeys(rng)

    n = p * q

    if verbose:
        print(f"p = {p}, q = {q}, n = {n}")

    c = modexp(message, PUBLIC_EXPONENT, n)
    return p, q, c


def Decrypt(p: int, q: int, ciphertext: int) -> int:
    d = modinv(PUBLIC_EXPONENT, lcm(p - 1, q - 1))

    m = modexp(ciphertext, d, p * q)
    return m
