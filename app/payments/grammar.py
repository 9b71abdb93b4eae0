"""Instruction type detection and fixed positional keyword grammar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from app.payments.constants import (
    ACCOUNT_OFFSETS,
    AMOUNT_IDX,
    CURRENCY_IDX,
    DATE_IDX,
    ON_IDX,
    ON_KEYWORD,
    KeywordSlot,
    StatusCode,
    TransactionType,
)
from app.payments.results import Ok, Result, fail
from app.utils.strings import is_near_match


@dataclass(frozen=True)
class TokenPositions:
    """Raw field tokens picked from their fixed offsets."""

    amount: Optional[str]
    currency: Optional[str]
    from_account: Optional[str]
    to_account: Optional[str]
    on_token: Optional[str]
    date_token: Optional[str]
    token_count: int


def detect_type(upper_tokens: Sequence[str]) -> Optional[TransactionType]:
    """Read DEBIT/CREDIT from the first token, None when unrecognised."""

    if not upper_tokens:
        return None
    try:
        return TransactionType(upper_tokens[0])
    except ValueError:
        return None


def validate_keywords(upper_tokens: Sequence[str], pattern: Sequence[KeywordSlot]) -> Result[None]:
    """Check every keyword slot; missing keywords win over mismatched ones."""

    missing: list[str] = []
    mismatched: list[tuple[str, str]] = []

    for slot in pattern:
        if len(upper_tokens) <= slot.idx:
            missing.append(slot.keyword)
        elif upper_tokens[slot.idx] != slot.keyword:
            mismatched.append((slot.keyword, upper_tokens[slot.idx]))

    if missing:
        return fail(StatusCode.MISSING_KEYWORD, f"Missing keyword(s): {', '.join(missing)}")

    if mismatched:
        details = []
        for expected, found in mismatched:
            note = f"expected '{expected}' but found '{found}'"
            if is_near_match(expected, found):
                note += f" (did you mean '{expected}'?)"
            details.append(note)
        return fail(StatusCode.INVALID_KEYWORD, f"Invalid keyword(s): {'; '.join(details)}")

    return Ok(None)


def _token_at(tokens: Sequence[str], idx: int) -> Optional[str]:
    return tokens[idx] if len(tokens) > idx else None


def extract_token_positions(type_: TransactionType, tokens: Sequence[str]) -> TokenPositions:
    """Pick original-case field tokens for the given instruction type."""

    from_idx, to_idx = ACCOUNT_OFFSETS[type_]
    return TokenPositions(
        amount=_token_at(tokens, AMOUNT_IDX),
        currency=_token_at(tokens, CURRENCY_IDX),
        from_account=_token_at(tokens, from_idx),
        to_account=_token_at(tokens, to_idx),
        on_token=_token_at(tokens, ON_IDX),
        date_token=_token_at(tokens, DATE_IDX),
        token_count=len(tokens),
    )


def has_on_keyword(positions: TokenPositions) -> bool:
    return positions.on_token is not None and positions.on_token.upper() == ON_KEYWORD

