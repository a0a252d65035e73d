"""
Exceptions for RSA Accumulator operations.
"""


class AccumulatorError(Exception):
    """Base class for accumulator errors."""


class RandomnessError(AccumulatorError):
    """The randomness source failed or returned fewer bytes than requested.

    Recoverable: the caller may retry key generation with a working source.
    """


class InvariantViolation(AccumulatorError, RuntimeError):
    """An arithmetic invariant was broken (non-invertible prime, failed prime search).

    Fatal: it signals a corrupted key or broken randomness, never an expected
    runtime condition.
    """
