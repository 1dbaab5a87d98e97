import pytest
from sympy import isprime, nextprime, prevprime

from toyrsa.arith.primality import primality
from toyrsa.constants import PRIME_HIGH, PRIME_LOW, U64_MAX

SMALL_LIMIT = 2 ** 20


def sieve(limit):
    is_prime = [True] * limit
    is_prime[0] = is_prime[1] = False
    for i in range(2, int(limit ** 0.5) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = [False] * len(range(i * i, limit, i))
    return is_prime


def test_primality_small_range_matches_sieve():
    reference = sieve(SMALL_LIMIT)
    mismatches = [n for n in range(SMALL_LIMIT) if primality(n) != reference[n]]
    assert mismatches == []


def test_primality_small_values():
    assert primality(2)
    assert primality(3)
    assert primality(5)
    assert not primality(0)
    assert not primality(1)
    assert not primality(4)
    assert not primality(9)
    assert not primality(25)
    assert not primality(49)


def test_primality_near_key_range():
    candidates = []
    n = PRIME_LOW
    for _ in range(25):
        n = nextprime(n)
        candidates.append(n)
    n = PRIME_HIGH
    for _ in range(25):
        n = prevprime(n)
        candidates.append(n)

    for p in candidates:
        assert primality(p)
        for neighbour in (p - 2, p - 1, p + 1, p + 2):
            assert primality(neighbour) == isprime(neighbour)


def test_primality_composites_near_key_range():
    # semiprimes built from primes between 2^15 and 2^16
    a = nextprime(2 ** 15)
    b = nextprime(a)
    c = prevprime(2 ** 16)
    for n in (a * b, b * c, a * c, c * c, PRIME_LOW + 1, PRIME_HIGH - 3):
        assert primality(n) == isprime(n)
        assert not primality(n)


@pytest.mark.parametrize("n", [2 ** 31 - 1, 1_000_000_007, 2_147_483_629, 4_294_967_291])
def test_primality_known_primes(n):
    assert primality(n)
    assert isprime(n)


def test_primality_rejects_negative():
    with pytest.raises(ValueError):
        primality(-7)


@pytest.mark.parametrize("n", [U64_MAX, U64_MAX - 1, U64_MAX - 60])
def test_primality_composites_near_u64_max(n):
    # each has a factor of 2 or 3, so trial division stops at once
    assert primality(n) == isprime(n)
    assert not primality(n)
