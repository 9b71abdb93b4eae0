"""Field parsers for amount, currency, account ids and execution date."""

from __future__ import annotations

import sys
from datetime import date
from typing import Optional

from app.payments import messages
from app.payments.constants import ACCOUNT_ID_EXTRA_CHARS, DATE_IDX, StatusCode
from app.payments.grammar import TokenPositions, has_on_keyword
from app.payments.results import Ok, Result, fail
from app.utils.currency import normalize_currency


def digits_error(value: Optional[str]) -> Optional[str]:
    """Return why ``value`` is not a plain ASCII digit string, or None when it is."""

    if not value:
        return "Amount must not be empty"

    for char in value:
        if char == "-":
            return "Amount cannot contain negative sign"
        if char == ".":
            return "Amount cannot contain decimal point"
        if not "0" <= char <= "9":
            return f"Invalid character '{char}' in amount"
    return None


def parse_amount(token: Optional[str]) -> Result[int]:
    error = digits_error(token)
    if error is not None:
        return fail(StatusCode.INVALID_AMOUNT, f"{messages.INVALID_AMOUNT}: {error}")

    try:
        amount = int(token, 10)
    except ValueError:
        return fail(StatusCode.INVALID_AMOUNT, f"{messages.INVALID_AMOUNT}: Amount is too large")

    if amount <= 0 or amount > sys.float_info.max:
        return fail(StatusCode.INVALID_AMOUNT, messages.INVALID_AMOUNT)
    return Ok(amount)


def parse_currency(token: Optional[str]) -> Result[str]:
    currency = normalize_currency(token)
    if currency is None:
        shown = (token or "").upper()
        return fail(StatusCode.UNSUPPORTED_CURRENCY, f"{messages.UNSUPPORTED_CURRENCY}, but found '{shown}'")
    return Ok(currency)


def _is_account_char(char: str) -> bool:
    return ("0" <= char <= "9") or ("A" <= char <= "Z") or ("a" <= char <= "z") or char in ACCOUNT_ID_EXTRA_CHARS


def account_id_error(account_id: Optional[str]) -> Optional[str]:
    """Return the first problem with an account id, or None when it is valid."""

    if not account_id:
        return "Account id must not be empty"
    invalid = next((char for char in account_id if not _is_account_char(char)), None)
    if invalid is not None:
        return f"Invalid character '{invalid}' in account id"
    return None


def parse_accounts(
    from_account: Optional[str],
    to_account: Optional[str],
) -> Result[tuple[str, str]]:
    """Validate both ids and return them as ``(debit_account, credit_account)``.

    The FROM account is always debited and the TO account always credited.
    """

    from_error = account_id_error(from_account)
    if from_error is not None:
        return fail(StatusCode.INVALID_ACCOUNT_ID, f"{messages.INVALID_ACCOUNT_ID} (from: {from_error})")

    to_error = account_id_error(to_account)
    if to_error is not None:
        return fail(StatusCode.INVALID_ACCOUNT_ID, f"{messages.INVALID_ACCOUNT_ID} (to: {to_error})")

    return Ok((from_account, to_account))


def is_date_shaped(token: Optional[str]) -> bool:
    """Loose YYYY-MM-DD shape check used to spot a date missing its ON keyword."""

    return token is not None and len(token) == 10 and token[4] == "-" and token[7] == "-"


def date_format_error(value: str) -> Optional[str]:
    """Strict ``YYYY-MM-DD`` check, including calendar validity."""

    if not is_date_shaped(value):
        return messages.INVALID_DATE_FORMAT

    year, month, day = value[0:4], value[5:7], value[8:10]
    if any(digits_error(part) is not None for part in (year, month, day)):
        return messages.INVALID_DATE_FORMAT

    month_int = int(month)
    day_int = int(day)
    if not 1 <= month_int <= 12:
        return messages.INVALID_MONTH
    if not 1 <= day_int <= 31:
        return messages.INVALID_DAY

    try:
        date(int(year), month_int, day_int)
    except ValueError:
        return messages.INVALID_DATE_FORMAT
    return None


def parse_execution_date(positions: TokenPositions) -> Result[Optional[str]]:
    """Resolve the optional ``ON YYYY-MM-DD`` clause at the end of an instruction."""

    # Short instructions carry no date clause; ON is treated as satisfied.
    if positions.token_count < DATE_IDX:
        return Ok(None)

    if not has_on_keyword(positions):
        if is_date_shaped(positions.date_token) or is_date_shaped(positions.on_token):
            return fail(StatusCode.INVALID_DATE, messages.DATE_WITHOUT_ON)
        return fail(StatusCode.MISSING_KEYWORD, f"{messages.MISSING_KEYWORD}: 'ON'")

    if positions.date_token is None:
        return fail(StatusCode.INVALID_DATE, messages.INCOMPLETE_DATE)

    error = date_format_error(positions.date_token)
    if error is not None:
        return fail(StatusCode.INVALID_DATE, error)
    return Ok(positions.date_token)
