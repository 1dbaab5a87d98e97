from toyrsa.arith.modular import check_u64


def primality(num: int) -> bool:
    """Deterministic trial division over candidates of the form 6k-1 and 6k+1."""
    check_u64("num", num)

    if num == 2 or num == 3:
        return True
    elif num <= 1 or num % 2 == 0 or num % 3 == 0:
        return False

    i = 5
    while i * i <= num:
        if num % i == 0 or num % (i + 2) == 0:
            return False
        i += 6
    return True
