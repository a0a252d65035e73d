"""
RSA Key Generator for the Accumulator

Generates the modulus N = P * Q together with its totient. BASE must be
invertible modulo the totient, so prime pairs are redrawn until it is.
"""

import logging
from typing import Optional, Tuple

from Crypto.Random import get_random_bytes

from .keys import PrivateKey, PublicKey
from .primes import RandFunc, random_prime
from .rsa_params import BASE, KEY_PRIME_BITS, MIN_KEY_PRIME_BITS, validate_modulus, validate_totient
from .trapdoor_operations import compute_phi_n

logger = logging.getLogger(__name__)


def generate_key(
    randfunc: Optional[RandFunc] = None,
    *,
    prime_bits: int = KEY_PRIME_BITS,
) -> Tuple[PublicKey, PrivateKey]:
    """
    Generate an accumulator key pair.

    Args:
        randfunc: Randomness source returning n bytes per call
            (default: Crypto.Random.get_random_bytes)
        prime_bits: Bit length of each of P and Q (default: 1024)

    Returns:
        Tuple[PublicKey, PrivateKey]: (public_key, private_key)

    Raises:
        RandomnessError: If the randomness source fails (not retried)
        ValueError: If prime_bits is below the supported minimum
    """
    if prime_bits < MIN_KEY_PRIME_BITS:
        raise ValueError(f"prime_bits must be at least {MIN_KEY_PRIME_BITS}")

    if randfunc is None:
        randfunc = get_random_bytes

    attempt = 0
    while True:
        attempt += 1
        p = random_prime(prime_bits, randfunc)
        q = random_prime(prime_bits, randfunc)

        if p == q:
            logger.debug(f"Key attempt {attempt}: drew identical primes, retrying")
            continue

        totient = compute_phi_n(p, q)
        if not validate_totient(totient, BASE):
            logger.debug(f"Key attempt {attempt}: gcd({BASE}, totient) != 1, retrying")
            continue

        private_key = PrivateKey(p=p, q=q, n=p * q, totient=totient)
        public_key = private_key.public_key()
        validate_modulus(public_key.n)

        logger.info(f"Generated accumulator key: N={public_key.n.bit_length()} bits after {attempt} attempt(s)")
        return public_key, private_key


def get_key_info(public_key: PublicKey) -> dict:
    """Summary of a public key suitable for logging."""
    return {
        "modulus_bits": public_key.n.bit_length(),
        "modulus_hex_prefix": hex(public_key.n)[:18],
        "base": BASE,
    }
