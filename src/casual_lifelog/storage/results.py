"""
Explicit result type for remote mirror operations.

Remote calls never raise into the reconciliation layer. Each returns a
RemoteResult whose status is one of:

- "ok": the call succeeded; ``value`` holds the payload (None for writes)
- "unavailable": no remote is configured for this process
- "failed": the call was attempted and failed; ``error`` says why
"""

from dataclasses import dataclass
from typing import Generic, Literal, Optional, TypeVar

from casual_lifelog.errors import RemoteError

T = TypeVar("T")

RemoteStatus = Literal["ok", "unavailable", "failed"]


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    """
    Outcome of a single remote mirror call.

    Examples:
        >>> RemoteResult.ok([]).is_ok
        True
        >>> RemoteResult.unavailable().status
        'unavailable'
    """

    status: RemoteStatus
    value: Optional[T] = None
    error: Optional[RemoteError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "RemoteResult[T]":
        return cls(status="ok", value=value)

    @classmethod
    def unavailable(cls) -> "RemoteResult[T]":
        return cls(status="unavailable")

    @classmethod
    def failed(cls, error: RemoteError) -> "RemoteResult[T]":
        return cls(status="failed", error=error)

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
