"""Tagged results returned by the card service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    VALIDATION_ERROR = "validation_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True)
class CardOutcome(Generic[T]):
    kind: OutcomeKind
    value: Optional[T] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls, value: Optional[T] = None) -> "CardOutcome[T]":
        return cls(OutcomeKind.SUCCESS, value)

    @classmethod
    def not_found(cls) -> "CardOutcome[T]":
        return cls(OutcomeKind.NOT_FOUND)

    @classmethod
    def validation_error(cls, detail: str) -> "CardOutcome[T]":
        return cls(OutcomeKind.VALIDATION_ERROR, detail=detail)

    @classmethod
    def internal_error(cls) -> "CardOutcome[T]":
        return cls(OutcomeKind.INTERNAL_ERROR)
