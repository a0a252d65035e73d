"""
RSA Accumulator Package

Accumulates a batch of items into one RSA group element with a
constant-size membership witness per item. Keys, accumulator values and
witnesses are plain integers.
"""

from .accumulator import accumulate, compute_witness, verify, verify_membership
from .exceptions import AccumulatorError, InvariantViolation, RandomnessError
from .hash_to_prime import hash_to_prime
from .key_generator import generate_key
from .keys import AccumulationResult, PrivateKey, PublicKey
from .parallel import parallel_map
from .rsa_params import BASE
from .version import __version__

__all__ = [
    "accumulate",
    "compute_witness",
    "verify",
    "verify_membership",
    "hash_to_prime",
    "generate_key",
    "parallel_map",
    "AccumulationResult",
    "PrivateKey",
    "PublicKey",
    "AccumulatorError",
    "InvariantViolation",
    "RandomnessError",
    "BASE",
    "__version__",
]
