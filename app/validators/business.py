"""Business rules evaluated against a parsed instruction and caller accounts."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple, Optional

from app.payments import messages
from app.payments.constants import InstructionStatus, StatusCode
from app.payments.results import Ok, Result, fail
from app.schemas.payment import AccountIn
from app.utils.currency import SUPPORTED_CURRENCIES, normalize_currency_code


class StatusInfo(NamedTuple):
    status: InstructionStatus
    status_code: StatusCode
    status_reason: str


def ensure_accounts_exist(
    debit: Optional[AccountIn],
    credit: Optional[AccountIn],
    debit_account_id: str,
    credit_account_id: str,
) -> Result[None]:
    """Both accounts must be present in the caller-supplied list."""

    if debit is None and credit is None:
        return fail(StatusCode.ACCOUNT_NOT_FOUND, messages.ACCOUNT_NOT_FOUND)
    if debit is None:
        return fail(
            StatusCode.ACCOUNT_NOT_FOUND,
            f"{messages.ACCOUNT_NOT_FOUND}: debit account {debit_account_id} not found",
        )
    if credit is None:
        return fail(
            StatusCode.ACCOUNT_NOT_FOUND,
            f"{messages.ACCOUNT_NOT_FOUND}: credit account {credit_account_id} not found",
        )
    return Ok(None)


def ensure_currency_match(debit: AccountIn, credit: AccountIn, currency: str) -> Result[None]:
    """Debit account, credit account and instruction must share one supported currency."""

    debit_currency = normalize_currency_code(debit.currency)
    credit_currency = normalize_currency_code(credit.currency)

    if debit_currency != credit_currency:
        return fail(
            StatusCode.CURRENCY_MISMATCH,
            f"{messages.CURRENCY_MISMATCH}: debit account is {debit_currency}, credit account is {credit_currency}",
        )
    if debit_currency not in SUPPORTED_CURRENCIES:
        return fail(
            StatusCode.UNSUPPORTED_CURRENCY,
            f"{messages.UNSUPPORTED_CURRENCY}, but accounts are in '{debit_currency}'",
        )
    if currency != debit_currency:
        return fail(
            StatusCode.CURRENCY_MISMATCH,
            f"{messages.CURRENCY_MISMATCH}: Instruction currency {currency} "
            f"does not match debit account currency {debit_currency}",
        )
    return Ok(None)


def ensure_distinct_accounts(debit_account_id: str, credit_account_id: str) -> Result[None]:
    if debit_account_id == credit_account_id:
        return fail(StatusCode.SAME_ACCOUNT, f"{messages.SAME_ACCOUNT_ERROR}: both accounts are {debit_account_id}")
    return Ok(None)


def ensure_sufficient_funds(debit: AccountIn, amount: int) -> Result[None]:
    balance = debit.balance
    if not isinstance(balance, (int, float)) or balance < amount:
        return fail(
            StatusCode.INSUFFICIENT_FUNDS,
            f"{messages.INSUFFICIENT_FUNDS}: available balance is {balance} and required is {amount}",
        )
    return Ok(None)


def determine_status(execute_by: Optional[str], today: date) -> StatusInfo:
    """Future-dated instructions are pending; undated, today or past ones execute now."""

    # Fixed-width ISO strings compare in calendar order.
    if execute_by and execute_by > today.isoformat():
        return StatusInfo(InstructionStatus.PENDING, StatusCode.PENDING, messages.TRANSACTION_PENDING)
    return StatusInfo(InstructionStatus.SUCCESSFUL, StatusCode.SUCCESS, messages.TRANSACTION_SUCCESSFUL)
