"""
Unit Tests for the Probable-Prime Search
"""

import itertools

import pytest
from Crypto.Random import get_random_bytes

from rsa_accum.exceptions import InvariantViolation, RandomnessError
from rsa_accum.primes import is_probable_prime, random_prime, read_exact


def constant_source(byte: int):
    """Randomness source that always returns the same byte."""
    return lambda n: bytes([byte]) * n


class TestIsProbablePrime:
    """Test the primality check."""

    def test_small_primes(self):
        for p in (2, 3, 5, 7, 11, 13, 65537):
            assert is_probable_prime(p)

    def test_small_composites(self):
        for n in (0, 1, 4, 9, 15, 209, 65535):
            assert not is_probable_prime(n)

    def test_negative(self):
        assert not is_probable_prime(-7)


class TestReadExact:
    """Test reading from a randomness source."""

    def test_read_exact_ok(self):
        assert read_exact(constant_source(0xAB), 4) == b"\xab" * 4

    def test_read_exact_short_read(self):
        with pytest.raises(RandomnessError, match="instead of 8 bytes"):
            read_exact(lambda n: b"\x00" * (n - 1), 8)

    def test_read_exact_wrong_type(self):
        with pytest.raises(RandomnessError):
            read_exact(lambda n: "not bytes", 8)

    def test_read_exact_source_raises(self):
        def failing(n):
            raise OSError("entropy pool unavailable")

        with pytest.raises(RandomnessError, match="entropy pool unavailable"):
            read_exact(failing, 8)


class TestRandomPrime:
    """Test prime search over a byte source."""

    @pytest.mark.parametrize("bits", [2, 3, 4, 17, 64, 256])
    def test_exact_bit_length(self, bits):
        prime = random_prime(bits, get_random_bytes)

        assert prime.bit_length() == bits
        assert is_probable_prime(prime)

    def test_top_two_bits_set(self):
        prime = random_prime(128, get_random_bytes)

        assert prime >> 126 == 0b11

    def test_deterministic_for_same_stream(self):
        """Equal byte streams give equal primes."""
        seed = get_random_bytes(4096)

        def stream():
            data = iter(seed)
            return lambda n: bytes(itertools.islice(data, n))

        assert random_prime(64, stream()) == random_prime(64, stream())

    def test_all_zero_source(self):
        """Zero bytes still give a candidate with forced bits: 0b1101 = 13."""
        assert random_prime(4, constant_source(0x00)) == 13

    def test_attempts_exhausted(self):
        """0xFF bytes always give 0b1111 = 15, which is composite."""
        with pytest.raises(InvariantViolation, match="Could not find a 4-bit prime"):
            random_prime(4, constant_source(0xFF), max_attempts=5)

    def test_invalid_bits(self):
        with pytest.raises(ValueError, match="at least 2 bits"):
            random_prime(1, get_random_bytes)

    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="max_attempts must be positive"):
            random_prime(16, get_random_bytes, max_attempts=0)

    def test_source_failure_propagates(self):
        with pytest.raises(RandomnessError):
            random_prime(64, lambda n: b"")
