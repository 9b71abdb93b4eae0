"""Currency code normalization for the supported settlement currencies."""

from typing import Optional

SUPPORTED_CURRENCIES = frozenset({"NGN", "USD", "GBP", "GHS"})


def normalize_currency_code(raw: Optional[str]) -> str:
    """Uppercase a currency code; missing values normalize to an empty string."""

    return (raw or "").upper()


def normalize_currency(raw: Optional[str]) -> Optional[str]:
    """Normalize a currency string to a supported ISO code.

    Matching is case-insensitive but otherwise exact: no aliases, no trimming.
    Returns None if the code is not supported.
    """
    upper = normalize_currency_code(raw)
    if upper in SUPPORTED_CURRENCIES:
        return upper
    return None
