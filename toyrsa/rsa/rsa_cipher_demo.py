from toyrsa.arith.modular import lcm, modexp, modinv
from toyrsa.arith.primality import primality
from toyrsa.constants import PUBLIC_EXPONENT

FACTOR_LIMIT = 2 ** 32


class ToyRSADemo:
    """Textbook RSA over user-supplied primes, one character per block."""

    @staticmethod
    def CheckPrime(n: int) -> bool:
        if n < 0:
            return False
        return primality(n)

    @staticmethod
    def GenerateKeys(p: int, q: int):
        # bounds CheckPrime to sqrt(2^32) trial divisors
        if p >= FACTOR_LIMIT or q >= FACTOR_LIMIT:
            raise ValueError("p and q must be below 2^32 so p * q fits in 64 bits")
        if not ToyRSADemo.CheckPrime(p) or not ToyRSADemo.CheckPrime(q):
            raise ValueError("p and q must be prime number.")
        if p == q:
            raise ValueError("p and q must not be equal")

        n = p * q
        lam = lcm(p - 1, q - 1)

        e = PUBLIC_EXPONENT
        try:
            d = modinv(e, lam)
        except ValueError:
            raise ValueError(f"e={e} is not coprime to lcm(p-1, q-1)={lam}. Choose other primes.") from None

        public_key = (e, n)
        private_key = (d, n)

        return public_key, private_key, p, q, lam

    @staticmethod
    def Encrypt(plaintext: str, public_key):
        e, n = public_key
        cipher_block = []

        for ch in plaintext:
            m = ord(ch)
            if m >= n:
                raise ValueError(f"Character '{ch}' has code {m}, which is >= n={n}. Choose larger primes.")
            c = modexp(m, e, n)
            cipher_block.append(c)
        return cipher_block

    @staticmethod
    def Decrypt(cipher_block, private_key):
        d, n = private_key
        plaintext_char = []

        for c in cipher_block:
            m = modexp(c, d, n)
            plaintext_char.append(chr(m))

        return "".join(plaintext_char)
