PUBLIC_EXPONENT = 65537

# primes are drawn from [PRIME_LOW, PRIME_HIGH)
PRIME_LOW = 2 ** 30
PRIME_HIGH = 2 ** 31

U64_MAX = 2 ** 64 - 1

ZERO_MODULUS_MSG = "modexp: error: m cannot be zero"
