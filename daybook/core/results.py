"""Typed success/failure results returned by service functions.

Services never raise for expected failures (validation, store errors).
Callers branch on ``result.ok`` and read either ``data`` or ``error``/``message``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

FUTURE_DATE = "future_date"
STORE_ERROR = "store_error"
VALIDATION_ERROR = "validation_error"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: Optional[T] = None) -> "ServiceResult[T]":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str, message: str) -> "ServiceResult[T]":
        return cls(ok=False, error=error, message=message)

    @property
    def is_future_date(self) -> bool:
        return self.error == FUTURE_DATE

    def to_payload(self) -> dict:
        """Error envelope used by the JSON API."""
        return {"ok": False, "error": self.error, "message": self.message}
