"""Token-level instruction parser: grammar first, then each field in turn."""

from __future__ import annotations

from typing import Sequence

from app.payments.constants import INSTRUCTION_PATTERNS, TransactionType
from app.payments.fields import parse_accounts, parse_amount, parse_currency, parse_execution_date
from app.payments.grammar import extract_token_positions, validate_keywords
from app.payments.results import Failure, Ok, ParsedInstruction, Result


def parse_instruction_tokens(
    type_: TransactionType,
    tokens: Sequence[str],
    upper_tokens: Sequence[str],
) -> Result[ParsedInstruction]:
    """Run every parsing stage for a recognised instruction type; first failure wins."""

    keywords = validate_keywords(upper_tokens, INSTRUCTION_PATTERNS[type_])
    if isinstance(keywords, Failure):
        return keywords

    positions = extract_token_positions(type_, tokens)

    execute_by = parse_execution_date(positions)
    if isinstance(execute_by, Failure):
        return execute_by

    amount = parse_amount(positions.amount)
    if isinstance(amount, Failure):
        return amount

    currency = parse_currency(positions.currency)
    if isinstance(currency, Failure):
        return currency

    accounts = parse_accounts(positions.from_account, positions.to_account)
    if isinstance(accounts, Failure):
        return accounts

    debit_account, credit_account = accounts.value
    return Ok(
        ParsedInstruction(
            type=type_,
            amount=amount.value,
            currency=currency.value,
            debit_account=debit_account,
            credit_account=credit_account,
            execute_by=execute_by.value,
        )
    )
