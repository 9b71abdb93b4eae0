from typing import Union


def format_amount(amount: Union[int, float, None]) -> str:
    """Render a balance or amount in plain notation for human-readable messages."""

    if amount is None:
        return ""
    if isinstance(amount, float) and amount.is_integer():
        # 500.0 -> "500"
        return str(int(amount))
    return str(amount)
