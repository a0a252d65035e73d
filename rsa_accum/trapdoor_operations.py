"""
Trapdoor Operations for RSA Accumulators

Arithmetic that needs the factorization of N: the group order and
inverses modulo it. With the totient known, "dividing" the accumulator
exponent by one item's prime is a single modular inverse instead of a
product over every other item.
"""

from typing import Iterable, Optional, Tuple


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Computes gcd(a, b) and coefficients x, y such that ax + by = gcd(a, b).
    Iterative, so 2048-bit operands do not hit the recursion limit.

    Example:
        >>> gcd, x, y = extended_gcd(35, 15)
        >>> assert gcd == 5
        >>> assert 35 * x + 15 * y == 5
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    return old_r, old_x, old_y


def modular_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a modulo m.

    Finds x such that (a * x) ≡ 1 (mod m), if it exists.

    Returns:
        Optional[int]: Modular inverse in [0, m) if it exists, None otherwise

    Raises:
        ValueError: If a or m is not positive

    Example:
        >>> inv = modular_inverse(3, 7)
        >>> assert (3 * inv) % 7 == 1
    """
    if a <= 0 or m <= 0:
        raise ValueError("Both a and m must be positive")

    a = a % m
    if a == 0:
        return None

    gcd, x, _ = extended_gcd(a, m)

    if gcd != 1:
        return None  # Inverse doesn't exist

    return x % m


def compute_phi_n(p: int, q: int) -> int:
    """
    Compute Euler's totient φ(N) = (p - 1) * (q - 1) for N = p * q.

    Raises:
        ValueError: If p or q is not greater than 1, or p == q
    """
    if p <= 1 or q <= 1:
        raise ValueError("Both p and q must be greater than 1")

    if p == q:
        raise ValueError("p and q must be distinct")

    return (p - 1) * (q - 1)


def aggregate_exponent(primes: Iterable[int], totient: int) -> int:
    """
    Product of all primes reduced modulo the totient.

    The running product is reduced after each multiplication so it never
    grows beyond the size of the totient.
    """
    if totient <= 0:
        raise ValueError("totient must be positive")

    exp = 1
    for p in primes:
        if p <= 0:
            raise ValueError("All primes must be positive")
        exp = (exp * p) % totient

    return exp


def witness_exponent(exp: int, prime: int, totient: int) -> Optional[int]:
    """
    Exponent of a witness: exp / prime (mod totient).

    Returns None when prime is not invertible modulo the totient.
    """
    inv = modular_inverse(prime, totient)
    if inv is None:
        return None

    return (exp * inv) % totient
