"""
Test Configuration and Fixtures

Provides fixtures for:
- A full-size (1024-bit primes) accumulator key pair, generated once per session
- A small key pair for fast arithmetic tests
- Isolated settings per test
"""

from typing import Tuple

import pytest

from rsa_accum.config import reset_settings
from rsa_accum.key_generator import generate_key
from rsa_accum.keys import PrivateKey, PublicKey


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full-size key generation or large batches")


@pytest.fixture(scope="session")
def key_pair() -> Tuple[PublicKey, PrivateKey]:
    """Full-size key pair shared by the whole session."""
    return generate_key()


@pytest.fixture(scope="session")
def small_key_pair() -> Tuple[PublicKey, PrivateKey]:
    """Key pair with 128-bit primes for fast tests."""
    return generate_key(prime_bits=128)


@pytest.fixture
def toy_private_key() -> PrivateKey:
    """N = 11 * 19 = 209, totient = 180."""
    return PrivateKey(p=11, q=19, n=209, totient=180)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test reads settings from a clean environment."""
    for name in ("ACCUM_WORKER_MODE", "ACCUM_MAX_WORKERS", "ACCUM_LOG_LEVEL", "ACCUM_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
