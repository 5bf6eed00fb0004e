"""
Integer factoring helpers.

Everything here works on plain Python ints so the numeric layers
(Rational, Radical) can share one implementation of gcd, exact roots and
perfect-power extraction.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple


def gcd(a: int, b: int) -> int:
    """Greatest common divisor using Euclidean algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def gcf(ns: Iterable[int]) -> int:
    """Greatest common factor of all the given numbers (0 for an empty or all-zero input)."""
    g = 0
    for n in ns:
        g = gcd(g, n)
        if g == 1:
            break
    return g


def prime_factors(n: int) -> Dict[int, int]:
    """
    Factor n > 0 into {prime: multiplicity} by trial division.

    Candidates run up to the square root of whatever is left of n; a
    remainder above 1 is itself prime.
    """
    if n < 1:
        raise ValueError(f"cannot factor {n}")
    out: Dict[int, int] = {}
    p = 2
    while p * p <= n:
        while n % p == 0:
            out[p] = out.get(p, 0) + 1
            n //= p
        p += 1 if p == 2 else 2
    if n > 1:
        out[n] = out.get(n, 0) + 1
    return out


def integer_root(n: int, k: int) -> Optional[int]:
    """
    Return the exact k-th root of n >= 0 when n is a perfect k-th power,
    None otherwise.
    """
    if n < 0 or k < 1:
        raise ValueError(f"no real root of index {k} for {n}")
    if n < 2:
        return n
    root = floor_root(n, k)
    return root if root ** k == n else None


def floor_root(n: int, k: int) -> int:
    """Largest r with r**k <= n (Newton iteration on ints)."""
    if n < 2:
        return n
    x = 1 << ((n.bit_length() + k - 1) // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def extract_power(n: int, k: int) -> Tuple[int, int]:
    """
    Split n > 0 into (outside, inside) with n == outside**k * inside and
    inside free of any perfect k-th power factor greater than 1.

    Example: extract_power(72, 2) -> (6, 2) because 72 = 6^2 * 2
    """
    if n < 1:
        raise ValueError(f"cannot extract powers from {n}")
    outside, inside = 1, 1
    for p, e in prime_factors(n).items():
        outside *= p ** (e // k)
        inside *= p ** (e % k)
    return outside, inside


def factor_pairs(n: int) -> List[Tuple[int, int]]:
    """All (a, b) with a * b == n and 0 < a <= b, smallest a first."""
    if n < 1:
        raise ValueError(f"cannot factor {n}")
    out: List[Tuple[int, int]] = []
    a = 1
    while a * a <= n:
        if n % a == 0:
            out.append((a, n // a))
        a += 1
    return out


def common_factors(a: int, b: int) -> List[int]:
    """Positive divisors shared by a and b, ascending."""
    g = gcd(a, b)
    if g == 0:
        raise ValueError("every integer divides 0")
    small = [p for p, _ in factor_pairs(g)]
    large = [q for _, q in reversed(factor_pairs(g)) if q not in small]
    return small + large
