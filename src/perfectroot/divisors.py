# -----------------------------------------------------------------------------
#  divisors.py
#  Perfect-number test and divisor helpers
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import cache
from math import isqrt

import gmpy2
from sympy import factorint


def divisor_pair_sum(n: int) -> int:
    """
    σ(n) by walking divisor pairs (d, n/d) for d ≤ √n.

    Each hit contributes both halves of the pair; a square divisor
    (d == n/d) is counted once. The sum includes n itself (paired with 1).
    """
    if n < 1:
        return 0
    total = 0
    for d in range(1, isqrt(n) + 1):
        if n % d == 0:
            pair = n // d
            total += d
            if d != pair:
                total += pair
    return total


def naive_proper_sum(n: int) -> int:
    """Brute-force s(n): sum of every d in 1..n-1 dividing n. O(n), reference only."""
    return sum(d for d in range(1, n) if n % d == 0)


def is_perfect(n: int) -> bool:
    """
    True iff n equals the sum of its proper divisors.

    Odd numbers are discarded up front: no odd perfect number is known and
    any that exists lies far beyond native integer range.
    """
    if n < 1 or n % 2 == 1:
        return False
    # remove n itself, it pairs with 1 but is not a proper divisor
    return divisor_pair_sum(n) - n == n


def proper_divisors(n: int) -> list[int]:
    """
    Proper divisors of n in ascending order: 1, then every d in 2..n//2.

    Walks up to n/2 instead of √n so the divisors come out already sorted
    for display.
    """
    if n <= 1:
        return []
    divs = [1]
    for d in range(2, n // 2 + 1):
        if n % d == 0:
            divs.append(d)
    return divs


# --- factorization cross-check -------------------------------------------------

@cache
def factorization(n: int) -> dict[int, int]:
    return factorint(n)


def sigma_from_factorization(fac: dict[int, int]) -> int:
    """σ(n) = ∏ (p^(a+1) − 1)/(p − 1) using gmpy2 bigints."""
    acc = gmpy2.mpz(1)
    for p, a in fac.items():
        pz = gmpy2.mpz(p)
        acc *= (pow(pz, a + 1) - 1) // (pz - 1)
    return int(acc)
