"""Fixed grammar tables, status codes and supported currencies."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class TransactionType(str, Enum):
    """Instruction intent read from the first token."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class InstructionStatus(str, Enum):
    """Final verdict of one processed instruction."""

    FAILED = "failed"
    PENDING = "pending"
    SUCCESSFUL = "successful"


class StatusCode(str, Enum):
    """Machine-readable outcome codes."""

    SUCCESS = "AP00"
    PENDING = "AP02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INVALID_DATE = "DT01"
    INVALID_AMOUNT = "AM01"
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD = "SY02"
    MALFORMED = "SY03"


class KeywordSlot(NamedTuple):
    """Keyword expected at an absolute token offset."""

    idx: int
    keyword: str


INSTRUCTION_PATTERNS: dict[TransactionType, tuple[KeywordSlot, ...]] = {
    TransactionType.DEBIT: (
        KeywordSlot(3, "FROM"),
        KeywordSlot(4, "ACCOUNT"),
        KeywordSlot(6, "FOR"),
        KeywordSlot(7, "CREDIT"),
        KeywordSlot(8, "TO"),
        KeywordSlot(9, "ACCOUNT"),
    ),
    TransactionType.CREDIT: (
        KeywordSlot(3, "TO"),
        KeywordSlot(4, "ACCOUNT"),
        KeywordSlot(6, "FOR"),
        KeywordSlot(7, "DEBIT"),
        KeywordSlot(8, "FROM"),
        KeywordSlot(9, "ACCOUNT"),
    ),
}

AMOUNT_IDX = 1
CURRENCY_IDX = 2
ON_IDX = 11
DATE_IDX = ON_IDX + 1
ON_KEYWORD = "ON"

# Offsets of the FROM/TO account ids; CREDIT mirrors DEBIT.
ACCOUNT_OFFSETS: dict[TransactionType, tuple[int, int]] = {
    TransactionType.DEBIT: (5, 10),
    TransactionType.CREDIT: (10, 5),
}

ACCOUNT_ID_EXTRA_CHARS = frozenset("-.@")
