"""Result values returned by every public contract operation."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(IntEnum):
    """Numeric denial reasons, stable across contracts."""

    NOT_ADMIN = 100
    NOT_FOUND = 101  # also: no access, insufficient stock
    NOT_OWNER = 102


@dataclass(frozen=True)
class ContractResult(Generic[T]):
    """Outcome of a contract call.

    A successful query for an unknown key is ``success=True`` with
    ``value=None``; only a refused call carries an ``error``.
    """

    success: bool
    value: Optional[T] = None
    error: Optional[ErrorCode] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "ContractResult[T]":
        """Build a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: ErrorCode) -> "ContractResult[T]":
        """Build a refused result."""
        return cls(success=False, error=ErrorCode(error))
