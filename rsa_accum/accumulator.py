"""
RSA Accumulator Core Operations

Batch accumulation with the private key and membership verification with
the public key.

With the totient known, the accumulator for a batch is
    A = BASE^(p_1 * ... * p_n mod T) mod N
and the witness for item i is A with p_i removed from the exponent:
    w_i = BASE^(exp * p_i^-1 mod T) mod N
so every witness costs one inverse and one exponentiation.
"""

import logging
import time
from concurrent.futures import Executor
from functools import partial
from typing import List, Optional, Sequence

from .config import get_settings
from .exceptions import InvariantViolation
from .hash_to_prime import hash_to_prime
from .keys import AccumulationResult, PrivateKey, PublicKey
from .parallel import parallel_map
from .rsa_params import BASE
from .trapdoor_operations import aggregate_exponent, witness_exponent

logger = logging.getLogger(__name__)


def compute_witness(prime: int, *, exp: int, totient: int, modulus: int) -> int:
    """
    Witness for one prime: BASE raised to exp / prime (mod totient).

    Raises:
        InvariantViolation: If prime shares a factor with the totient
    """
    e = witness_exponent(exp, prime, totient)
    if e is None:
        logger.error("Item prime is not invertible modulo the totient; key or prime is corrupt")
        raise InvariantViolation("item prime is not invertible modulo the totient")

    return pow(BASE, e, modulus)


def _check_items(items: Sequence[bytes]) -> List[bytes]:
    item_list = list(items)
    if not item_list:
        raise ValueError("items must not be empty")

    for i, item in enumerate(item_list):
        if not isinstance(item, (bytes, bytearray)):
            raise TypeError(f"item {i} must be bytes, got {type(item).__name__}")

    return [bytes(item) for item in item_list]


def accumulate(
    private_key: PrivateKey,
    items: Sequence[bytes],
    *,
    executor: Optional[Executor] = None,
    max_workers: Optional[int] = None,
    worker_mode: Optional[str] = None,
) -> AccumulationResult:
    """
    Accumulate a batch of items and compute a witness for every item.

    The default "thread" mode keeps every stage in one process; pow() holds
    the GIL, so it gives no CPU speedup. Pass worker_mode="process" (or set
    ACCUM_WORKER_MODE=process) to spread large batches across cores.

    Args:
        private_key: Key holding the modulus and its totient
        items: Non-empty sequence of item bytes; duplicates are allowed
        executor: Optional executor for the per-item stages
        max_workers: Pool size (default: settings.max_workers)
        worker_mode: "thread", "process" or "serial" (default: settings.worker_mode)

    Returns:
        AccumulationResult: value plus witnesses aligned with items

    Raises:
        ValueError: If items is empty
        TypeError: If an item is not bytes
        InvariantViolation: If an item prime is not invertible modulo the totient

    Example:
        >>> public_key, private_key = generate_key()
        >>> result = accumulate(private_key, [b"a", b"b"])
        >>> assert verify(public_key, result.value, result.witnesses[0], b"a")
    """
    item_list = _check_items(items)

    settings = get_settings()
    mode = worker_mode or settings.worker_mode
    workers = max_workers if max_workers is not None else settings.max_workers

    started = time.perf_counter()

    primes = parallel_map(hash_to_prime, item_list, executor=executor, max_workers=workers, mode=mode)
    primes_done = time.perf_counter()

    exp = aggregate_exponent(primes, private_key.totient)
    value = pow(BASE, exp, private_key.n)

    witness_fn = partial(compute_witness, exp=exp, totient=private_key.totient, modulus=private_key.n)
    witnesses = parallel_map(witness_fn, primes, executor=executor, max_workers=workers, mode=mode)
    finished = time.perf_counter()

    logger.debug(
        f"Prime stage {primes_done - started:.3f}s, "
        f"witness stage {finished - primes_done:.3f}s ({mode})"
    )
    logger.info(f"Accumulated {len(item_list)} items in {finished - started:.3f}s")

    return AccumulationResult(value=value, witnesses=tuple(witnesses))


def verify_membership(w: int, p: int, A: int, N: int) -> bool:
    """
    Verify that prime p is a member of accumulator A using witness w.

    Verification equation: w^p ≡ A (mod N)

    Returns:
        bool: True if p is a valid member, False otherwise
    """
    if w <= 0 or p <= 0 or A < 0 or N <= 0:
        return False

    if w >= N or A >= N:
        return False

    return pow(w, p, N) == A


def verify(public_key: PublicKey, acc: int, witness: int, item: bytes) -> bool:
    """
    Check that item is in the accumulator acc using its witness.

    Total: malformed inputs give False instead of raising. False means
    "not a member", never a system fault.

    Args:
        public_key: Public key holding the modulus
        acc: Accumulator value
        witness: Witness produced for item
        item: Item bytes

    Returns:
        bool: True if witness^hash_to_prime(item) ≡ acc (mod N)
    """
    if not isinstance(item, (bytes, bytearray)):
        return False

    for value in (acc, witness):
        if not isinstance(value, int) or isinstance(value, bool):
            return False

    n = getattr(public_key, "n", None)
    if not isinstance(n, int) or n <= 0:
        return False

    c = hash_to_prime(bytes(item))
    return verify_membership(witness, c, acc, n)
