"""
Explicit success/failure result for creators.

A creator that cannot make the requested product returns a failed
CreationResult instead of None, so callers cannot forget the check.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import CreationalError

T = TypeVar("T")


@dataclass(frozen=True)
class CreationResult(Generic[T]):
    """Outcome of a creation request: exactly one of product or error is set."""

    product: T | None = None
    error: CreationalError | None = None

    def __post_init__(self) -> None:
        if (self.product is None) == (self.error is None):
            raise ValueError("CreationResult needs exactly one of product or error")

    @classmethod
    def success(cls, product: T) -> "CreationResult[T]":
        return cls(product=product)

    @classmethod
    def failure(cls, error: CreationalError) -> "CreationResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the product, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        assert self.product is not None
        return self.product
