"""
RSA Parameters for Accumulator

Process-wide constants shared by key generation, accumulation and
verification, plus validation of a modulus against the fixed base.
"""

import math

# Public generator of the accumulator group
BASE = 65537

ONE = 1

# Bit length of each secret prime P, Q (N is twice this)
KEY_PRIME_BITS = 1024

# Bit length of the primes produced by hash_to_prime
HASH_PRIME_BITS = 256

# Smallest prime size accepted by generate_key (test fixtures use small keys)
MIN_KEY_PRIME_BITS = 16


def validate_modulus(N: int, g: int = BASE) -> None:
    """
    Validate an RSA modulus for accumulator operations.

    Args:
        N: RSA modulus
        g: Generator base

    Raises:
        ValueError: If parameters are invalid
    """
    if N <= 0:
        raise ValueError("RSA modulus N must be positive")

    if g <= 0:
        raise ValueError("Generator g must be positive")

    if g >= N:
        raise ValueError("Generator g must be less than modulus N")

    if math.gcd(N, g) != 1:
        raise ValueError("RSA modulus N and generator g must be coprime")


def validate_totient(totient: int, g: int = BASE) -> bool:
    """Return True when g is invertible modulo the group order."""
    return totient > 0 and math.gcd(g, totient) == ONE
