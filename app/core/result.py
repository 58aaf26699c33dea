"""
Result wrapper

Repositories return a Result instead of raising for expected failures
(invalid ids, missing rows, rejected input). A failed Result carries a
single human-readable message.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    _value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(_value=value)

    @classmethod
    def fail(cls, message: str) -> "Result[T]":
        return cls(error=message)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failed(self) -> bool:
        return self.error is not None

    @property
    def value(self) -> T:
        if self.is_failed:
            raise ValueError(f"Cannot read the value of a failed result: {self.error}")
        return self._value
