"""Tagged success/failure values passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from app.payments.constants import StatusCode, TransactionType

T = TypeVar("T")


@dataclass(frozen=True)
class InstructionError:
    """Terminal artifact of a failed stage."""

    code: StatusCode
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: InstructionError


Result = Union[Ok[T], Failure]


def fail(code: StatusCode, message: str) -> Failure:
    """Shortcut for building a failed stage result."""

    return Failure(InstructionError(code=code, message=message))


@dataclass(frozen=True)
class ParsedInstruction:
    """Fully parsed instruction ready for business-rule evaluation."""

    type: TransactionType
    amount: int
    currency: str
    debit_account: str
    credit_account: str
    execute_by: Optional[str] = None
