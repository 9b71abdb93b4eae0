"""Business-rule evaluation turning a parsed instruction into a verdict."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from app.payments.accounts import select_relevant_accounts
from app.payments.responses import build_error_response, build_verdict_response
from app.payments.results import Failure, ParsedInstruction
from app.schemas.payment import AccountIn, PaymentInstructionResponse
from app.validators.business import (
    determine_status,
    ensure_accounts_exist,
    ensure_currency_match,
    ensure_distinct_accounts,
    ensure_sufficient_funds,
)


def process_business_rules(
    parsed: ParsedInstruction,
    accounts: Sequence[AccountIn],
    today: date,
) -> PaymentInstructionResponse:
    """Check existence, currency, self-transfer and funds, then classify the transfer."""

    relevant = select_relevant_accounts(accounts, parsed.debit_account, parsed.credit_account)

    existence = ensure_accounts_exist(relevant.debit, relevant.credit, parsed.debit_account, parsed.credit_account)
    if isinstance(existence, Failure):
        return build_error_response(existence.error, parsed=parsed, accounts=relevant.snapshots)

    currency = ensure_currency_match(relevant.debit, relevant.credit, parsed.currency)
    if isinstance(currency, Failure):
        return build_error_response(currency.error, parsed=parsed, accounts=relevant.snapshots)

    distinct = ensure_distinct_accounts(parsed.debit_account, parsed.credit_account)
    if isinstance(distinct, Failure):
        return build_error_response(distinct.error, parsed=parsed, accounts=relevant.snapshots)

    funds = ensure_sufficient_funds(relevant.debit, parsed.amount)
    if isinstance(funds, Failure):
        return build_error_response(funds.error, parsed=parsed, accounts=relevant.snapshots)

    status_info = determine_status(parsed.execute_by, today)
    return build_verdict_response(parsed, status_info, relevant.snapshots)
