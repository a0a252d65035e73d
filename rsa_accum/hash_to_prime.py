"""
Hash-to-Prime Conversion for RSA Accumulators

Maps arbitrary item bytes to a 256-bit prime. The item is absorbed into a
SHAKE256 sponge and the squeezed stream feeds the probable-prime search,
so the same bytes always give the same prime.
"""

import logging

from Crypto.Hash import SHAKE256

from .exceptions import InvariantViolation, RandomnessError
from .primes import random_prime
from .rsa_params import HASH_PRIME_BITS

logger = logging.getLogger(__name__)


def hash_to_prime(data: bytes, *, bits: int = HASH_PRIME_BITS, max_attempts: int = 100_000) -> int:
    """
    Convert item bytes to a prime number.

    Args:
        data: The item bytes (may be empty)
        bits: Bit length of the resulting prime (default: 256)
        max_attempts: Maximum number of candidates to test (default: 100_000)

    Returns:
        int: A probable prime derived deterministically from data

    Raises:
        TypeError: If data is not bytes
        InvariantViolation: If the prime search fails; this does not happen
            with a working SHAKE256 and is never recoverable

    Example:
        >>> p = hash_to_prime(b"item")
        >>> assert p == hash_to_prime(b"item")
        >>> assert p.bit_length() == 256
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes")

    # Unclear whether a sponge-seeded prime search is a sound hash function.
    stream = SHAKE256.new(data=bytes(data))

    try:
        return random_prime(bits, stream.read, max_attempts=max_attempts)
    except RandomnessError as e:
        logger.error(f"SHAKE256 stream failed during prime search: {e}")
        raise InvariantViolation(f"hash_to_prime stream failure: {e}") from e


def _test_hash_to_prime() -> None:
    """Print primes for a few sample inputs."""
    test_cases = [
        b"",
        b"test_key_1",
        b"a" * 32,
        b"\x00" * 32,
        b"\xff" * 32,
    ]

    print("Testing hash_to_prime function:")
    for i, test_input in enumerate(test_cases):
        prime = hash_to_prime(test_input)
        print(f"  Test {i+1}: {test_input[:16]!r}... -> {prime} ({prime.bit_length()} bits)")
        assert prime == hash_to_prime(test_input), "hash_to_prime is not deterministic"


if __name__ == "__main__":
    _test_hash_to_prime()
