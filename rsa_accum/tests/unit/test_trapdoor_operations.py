"""
Unit Tests for Trapdoor Operations Module

Tests the totient arithmetic used to compute witnesses.
"""

import pytest

from rsa_accum.trapdoor_operations import (
    aggregate_exponent,
    compute_phi_n,
    extended_gcd,
    modular_inverse,
    witness_exponent,
)


class TestExtendedGCD:
    """Test extended Euclidean algorithm."""

    def test_extended_gcd_basic(self):
        gcd, x, y = extended_gcd(35, 15)
        assert gcd == 5
        assert 35 * x + 15 * y == gcd

    def test_extended_gcd_coprime(self):
        gcd, x, y = extended_gcd(7, 3)
        assert gcd == 1
        assert 7 * x + 3 * y == 1

    def test_extended_gcd_zero(self):
        gcd, x, y = extended_gcd(0, 5)
        assert gcd == 5
        assert 0 * x + 5 * y == 5

        gcd, x, y = extended_gcd(7, 0)
        assert gcd == 7
        assert 7 * x + 0 * y == 7

    def test_extended_gcd_large_operands(self):
        """2048-bit operands need many steps; the iterative version handles them."""
        a = (1 << 2047) + 12345
        b = (1 << 2046) + 6789
        gcd, x, y = extended_gcd(a, b)
        assert a * x + b * y == gcd


class TestModularInverse:
    """Test modular inverse computation."""

    def test_modular_inverse_basic(self):
        inv = modular_inverse(3, 7)
        assert inv == 5
        assert (3 * inv) % 7 == 1

    def test_modular_inverse_coprime(self):
        for a, m in [(7, 11), (5, 13), (2, 9), (7, 180)]:
            inv = modular_inverse(a, m)
            assert inv is not None
            assert (a * inv) % m == 1
            assert 0 <= inv < m

    def test_modular_inverse_reduces_a(self):
        """a larger than m is reduced first."""
        assert modular_inverse(10, 7) == modular_inverse(3, 7)

    def test_modular_inverse_no_inverse(self):
        assert modular_inverse(6, 9) is None
        assert modular_inverse(4, 8) is None
        assert modular_inverse(9, 9) is None

    def test_modular_inverse_matches_builtin(self):
        a = (1 << 100) + 7
        m = (1 << 127) - 1  # Mersenne prime
        inv = modular_inverse(a, m)
        assert inv == pow(a, -1, m)

    def test_modular_inverse_invalid_input(self):
        with pytest.raises(ValueError):
            modular_inverse(-1, 7)

        with pytest.raises(ValueError):
            modular_inverse(3, -7)

        with pytest.raises(ValueError):
            modular_inverse(0, 7)


class TestPhiComputation:
    """Test Euler's totient function computation."""

    def test_compute_phi_n_basic(self):
        assert compute_phi_n(11, 19) == 180
        assert compute_phi_n(5, 7) == 24

    def test_compute_phi_n_invalid(self):
        with pytest.raises(ValueError, match="greater than 1"):
            compute_phi_n(1, 7)

        with pytest.raises(ValueError, match="distinct"):
            compute_phi_n(7, 7)


class TestExponents:
    """Test aggregate and witness exponents."""

    def test_aggregate_exponent(self):
        assert aggregate_exponent([7, 13, 17], 180) == (7 * 13 * 17) % 180

    def test_aggregate_exponent_order_independent(self):
        assert aggregate_exponent([7, 13, 17], 180) == aggregate_exponent([17, 7, 13], 180)

    def test_aggregate_exponent_empty(self):
        assert aggregate_exponent([], 180) == 1

    def test_aggregate_exponent_invalid(self):
        with pytest.raises(ValueError, match="totient must be positive"):
            aggregate_exponent([3], 0)

        with pytest.raises(ValueError, match="primes must be positive"):
            aggregate_exponent([3, -5], 180)

    def test_witness_exponent_removes_prime(self):
        """witness_exponent * prime == exp (mod totient)."""
        exp = aggregate_exponent([7, 13, 17], 180)
        e = witness_exponent(exp, 13, 180)

        assert (e * 13) % 180 == exp
        assert e == (7 * 17) % 180

    def test_witness_exponent_not_invertible(self):
        assert witness_exponent(107, 5, 180) is None
