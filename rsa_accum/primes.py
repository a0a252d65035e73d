"""
Probable-Prime Search

Draws prime candidates from a caller-supplied byte source. The same search
backs key generation (with a cryptographic random source) and hash-to-prime
(with a SHAKE256 stream), so the output is a pure function of the bytes read.
"""

import logging
from typing import Callable, Optional

from Crypto.Hash import SHAKE256
from Crypto.Math.Primality import PROBABLY_PRIME, test_probable_prime

from .exceptions import InvariantViolation, RandomnessError

logger = logging.getLogger(__name__)

RandFunc = Callable[[int], bytes]


def read_exact(randfunc: RandFunc, n: int) -> bytes:
    """
    Read exactly n bytes from a randomness source.

    Raises:
        RandomnessError: If the source raises or returns a short read
    """
    try:
        chunk = randfunc(n)
    except Exception as e:
        raise RandomnessError(f"Randomness source failed: {e}") from e

    if not isinstance(chunk, (bytes, bytearray)) or len(chunk) != n:
        got = len(chunk) if isinstance(chunk, (bytes, bytearray)) else type(chunk).__name__
        raise RandomnessError(f"Randomness source returned {got} instead of {n} bytes")

    return bytes(chunk)


def _witness_stream(n: int) -> RandFunc:
    """Miller-Rabin bases derived from n itself, so the test reads no OS entropy."""
    return SHAKE256.new(data=b"mr-bases" + n.to_bytes((n.bit_length() + 7) // 8, "big")).read


def is_probable_prime(n: int) -> bool:
    """
    Miller-Rabin plus Lucas probable-prime test.

    Deterministic: the same n always gets the same bases and the same answer.
    """
    if n < 2:
        return False
    return test_probable_prime(n, randfunc=_witness_stream(n)) == PROBABLY_PRIME


def random_prime(bits: int, randfunc: RandFunc, *, max_attempts: Optional[int] = None) -> int:
    """
    Search for a probable prime of exactly `bits` bits.

    Each attempt reads a fresh candidate from randfunc, sets the two top bits
    (so the product of two such primes has exactly 2*bits bits) and the low
    bit, then tests it for primality.

    Args:
        bits: Bit length of the prime, at least 2
        randfunc: Callable returning the requested number of bytes
        max_attempts: Optional cap on the number of candidates tried

    Returns:
        int: A probable prime with bit_length() == bits

    Raises:
        ValueError: If bits < 2 or max_attempts is not positive
        RandomnessError: If randfunc fails
        InvariantViolation: If max_attempts candidates were all composite

    Example:
        >>> from Crypto.Random import get_random_bytes
        >>> p = random_prime(64, get_random_bytes)
        >>> assert p.bit_length() == 64
    """
    if bits < 2:
        raise ValueError("prime size must be at least 2 bits")
    if max_attempts is not None and max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    nbytes = (bits + 7) // 8
    excess = nbytes * 8 - bits
    top_bits = 3 << (bits - 2)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = int.from_bytes(read_exact(randfunc, nbytes), "big") >> excess
        candidate |= top_bits | 1

        if is_probable_prime(candidate):
            return candidate

    logger.error(f"No {bits}-bit prime found within {max_attempts} attempts")
    raise InvariantViolation(f"Could not find a {bits}-bit prime within {max_attempts} attempts")
