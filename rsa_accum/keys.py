"""
Key and Result Models for the RSA Accumulator

Immutable pydantic models. Values are plain Python ints so the embedding
application can serialize them however it likes.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PublicKey(BaseModel):
    """Public accumulator key: the RSA modulus only."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(..., description="RSA modulus N = P * Q", gt=0)


class PrivateKey(BaseModel):
    """
    Private accumulator key.

    Holds the secret primes and the group order (totient). The totient is
    the trapdoor that lets accumulate() reduce exponents and invert primes.
    """

    model_config = ConfigDict(frozen=True)

    p: int = Field(..., description="First secret prime", gt=1)
    q: int = Field(..., description="Second secret prime", gt=1)
    n: int = Field(..., description="Modulus N = P * Q", gt=0)
    totient: int = Field(..., description="Euler totient (P - 1) * (Q - 1)", gt=0)

    @model_validator(mode="after")
    def check_factorization(self) -> "PrivateKey":
        if self.p == self.q:
            raise ValueError("p and q must be distinct")
        if self.n != self.p * self.q:
            raise ValueError("n must equal p * q")
        if self.totient != (self.p - 1) * (self.q - 1):
            raise ValueError("totient must equal (p - 1) * (q - 1)")
        return self

    def public_key(self) -> PublicKey:
        return PublicKey(n=self.n)

    def __repr__(self) -> str:
        # Keep the factorization out of logs and tracebacks
        return f"PrivateKey(n_bits={self.n.bit_length()})"

    __str__ = __repr__


class AccumulationResult(BaseModel):
    """Accumulator value plus one witness per item, in input order."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., description="Accumulator value in [0, N)", ge=0)
    witnesses: Tuple[int, ...] = Field(..., description="Witnesses aligned with the input items")

    def witness_for(self, index: int) -> int:
        return self.witnesses[index]

    def astuple(self) -> Tuple[int, List[int]]:
        return self.value, list(self.witnesses)

    def __len__(self) -> int:
        return len(self.witnesses)
