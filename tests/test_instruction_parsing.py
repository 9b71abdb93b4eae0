from __future__ import annotations

import pytest

from app.payments.constants import INSTRUCTION_PATTERNS, StatusCode, TransactionType
from app.payments.fields import (
    date_format_error,
    parse_accounts,
    parse_amount,
    parse_currency,
    parse_execution_date,
)
from app.payments.grammar import detect_type, extract_token_positions, validate_keywords
from app.payments.parser import parse_instruction_tokens
from app.payments.results import Failure, Ok
from app.payments.tokenizer import tokenize, uppercase_tokens

DEBIT_TEXT = "DEBIT 100 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2"
CREDIT_TEXT = "CREDIT 100 NGN TO ACCOUNT A2 FOR DEBIT FROM ACCOUNT A1"


def _parse(text: str):
    tokens = tokenize(text)
    upper = uppercase_tokens(tokens)
    return parse_instruction_tokens(detect_type(upper), tokens, upper)


def test_tokenize_drops_empty_pieces() -> None:
    assert tokenize("  DEBIT   100  NGN ") == ["DEBIT", "100", "NGN"]
    assert tokenize("") == []
    assert tokenize("     ") == []


def test_detect_type_is_case_insensitive() -> None:
    assert detect_type(uppercase_tokens(["debit"])) is TransactionType.DEBIT
    assert detect_type(uppercase_tokens(["Credit"])) is TransactionType.CREDIT
    assert detect_type(uppercase_tokens(["TRANSFER"])) is None
    assert detect_type([]) is None


def test_missing_keywords_reported_together() -> None:
    result = validate_keywords(uppercase_tokens(tokenize("DEBIT 100 NGN FROM ACCOUNT A1 FOR")), INSTRUCTION_PATTERNS[TransactionType.DEBIT])

    assert isinstance(result, Failure)
    assert result.error.code == StatusCode.MISSING_KEYWORD
    assert result.error.message == "Missing keyword(s): CREDIT, TO, ACCOUNT"


def test_missing_keywords_win_over_mismatches() -> None:
    result = validate_keywords(uppercase_tokens(tokenize("DEBIT 100 NGN FORM ACCOUNT A1")), INSTRUCTION_PATTERNS[TransactionType.DEBIT])

    assert isinstance(result, Failure)
    assert result.error.code == StatusCode.MISSING_KEYWORD


def test_mismatches_reported_with_suggestion_only_for_near_misses() -> None:
    text = "DEBIT 100 NGN FORM ACCOUNT A1 WITH CREDIT TO ACOUNT A2"
    result = validate_keywords(uppercase_tokens(tokenize(text)), INSTRUCTION_PATTERNS[TransactionType.DEBIT])

    assert isinstance(result, Failure)
    assert result.error.code == StatusCode.INVALID_KEYWORD
    assert result.error.message == (
        "Invalid keyword(s): expected 'FROM' but found 'FORM' (did you mean 'FROM'?); "
        "expected 'FOR' but found 'WITH'; "
        "expected 'ACCOUNT' but found 'ACOUNT' (did you mean 'ACCOUNT'?)"
    )


def test_keywords_match_case_insensitively_but_fields_keep_case() -> None:
    result = _parse("debit 100 ngn from account acc-1 for credit to account Acc.2")

    assert isinstance(result, Ok)
    assert result.value.currency == "NGN"
    assert result.value.debit_account == "acc-1"
    assert result.value.credit_account == "Acc.2"


def test_credit_instruction_debits_the_from_account() -> None:
    result = _parse(CREDIT_TEXT)

    assert isinstance(result, Ok)
    assert result.value.type is TransactionType.CREDIT
    assert result.value.debit_account == "A1"
    assert result.value.credit_account == "A2"


def test_token_positions_swap_for_credit() -> None:
    positions = extract_token_positions(TransactionType.CREDIT, tokenize(CREDIT_TEXT))

    assert positions.from_account == "A1"
    assert positions.to_account == "A2"
    assert positions.on_token is None


@pytest.mark.parametrize(
    ("token", "fragment"),
    [
        ("-100", "cannot contain negative sign"),
        ("10.5", "cannot contain decimal point"),
        ("1e3", "Invalid character 'e' in amount"),
        ("", "must not be empty"),
        (None, "must not be empty"),
        ("9" * 5000, "too large"),
        ("9" * 400, "positive integer"),
    ],
)
def test_parse_amount_rejects_non_digit_tokens(token, fragment: str) -> None:
    result = parse_amount(token)

    assert isinstance(result, Failure)
    assert result.error.code == StatusCode.INVALID_AMOUNT
    assert fragment in result.error.message


def test_parse_amount() -> None:
    assert parse_amount("007") == Ok(7)
    zero = parse_amount("000")
    assert isinstance(zero, Failure)
    assert zero.error.code == StatusCode.INVALID_AMOUNT


def test_parse_currency() -> None:
    assert parse_currency("gbp") == Ok("GBP")

    result = parse_currency("eur")
    assert isinstance(result, Failure)
    assert result.error.code == StatusCode.UNSUPPORTED_CURRENCY
    assert "'EUR'" in result.error.message


def test_parse_accounts_reports_side_and_character() -> None:
    assert parse_accounts("user@bank.ng", "X-9") == Ok(("user@bank.ng", "X-9"))

    from_error = parse_accounts("A#1", "A2")
    to_error = parse_accounts("A1", "A_2")
    assert isinstance(from_error, Failure) and isinstance(to_error, Failure)
    assert from_error.error.code == StatusCode.INVALID_ACCOUNT_ID
    assert "(from: Invalid character '#' in account id)" in from_error.error.message
    assert "(to: Invalid character '_' in account id)" in to_error.error.message


@pytest.mark.parametrize(
    "value",
    ["2024-02-30", "2023-02-29", "2024-13-01", "2024-00-10", "2024-01-32", "2024/01/01", "24-01-01", "2024-1a-01", "0000-01-01"],
)
def test_date_format_rejects_invalid_dates(value: str) -> None:
    assert date_format_error(value) is not None


@pytest.mark.parametrize("value", ["2024-02-29", "2025-12-31", "1999-01-01"])
def test_date_format_accepts_calendar_dates(value: str) -> None:
    assert date_format_error(value) is None


def _date_result(suffix: str):
    tokens = tokenize(f"{DEBIT_TEXT} {suffix}".strip())
    return parse_execution_date(extract_token_positions(TransactionType.DEBIT, tokens))


def test_execution_date_optional_for_short_instructions() -> None:
    assert _date_result("") == Ok(None)


def test_execution_date_after_on_keyword() -> None:
    assert _date_result("on 2025-01-01") == Ok("2025-01-01")


@pytest.mark.parametrize(
    ("suffix", "code"),
    [
        ("ON", StatusCode.INVALID_DATE),
        ("ON 2025-02-30", StatusCode.INVALID_DATE),
        ("AT 2025-01-01", StatusCode.INVALID_DATE),
        ("2025-01-01", StatusCode.INVALID_DATE),
        ("LATER", StatusCode.MISSING_KEYWORD),
        ("AT tomorrow", StatusCode.MISSING_KEYWORD),
    ],
)
def test_execution_date_clause_errors(suffix: str, code: StatusCode) -> None:
    result = _date_result(suffix)

    assert isinstance(result, Failure)
    assert result.error.code == code


def test_missing_on_keyword_message() -> None:
    result = _date_result("LATER")

    assert isinstance(result, Failure)
    assert result.error.message == "Missing keyword: 'ON'"


def test_date_is_checked_before_amount() -> None:
    result = _parse("DEBIT -5 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2 ON 2025-13-01")

    assert isinstance(result, Failure)
    assert result.error.code == StatusCode.INVALID_DATE
