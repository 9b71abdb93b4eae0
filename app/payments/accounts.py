"""Account lookup and copy-on-write snapshots."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from app.schemas.payment import AccountIn, AccountSnapshot
from app.utils.currency import normalize_currency_code


class RelevantAccounts(NamedTuple):
    """Debit/credit lookups plus the snapshots reported alongside a verdict."""

    debit: Optional[AccountIn]
    credit: Optional[AccountIn]
    snapshots: tuple[AccountSnapshot, ...]


def find_account_by_id(accounts: Sequence[AccountIn], account_id: Optional[str]) -> Optional[AccountIn]:
    """First account with a matching id, None when absent."""

    if account_id is None:
        return None
    return next((account for account in accounts if account.id == account_id), None)


def create_snapshot(account: AccountIn) -> AccountSnapshot:
    return AccountSnapshot(
        id=account.id,
        balance=account.balance,
        balance_before=account.balance,
        currency=normalize_currency_code(account.currency),
    )


def select_relevant_accounts(
    accounts: Sequence[AccountIn],
    debit_account_id: Optional[str],
    credit_account_id: Optional[str],
) -> RelevantAccounts:
    """Look up both sides; the credit snapshot is skipped when it is the debit account."""

    debit = find_account_by_id(accounts, debit_account_id)
    credit = find_account_by_id(accounts, credit_account_id)

    snapshots: list[AccountSnapshot] = []
    if debit is not None:
        snapshots.append(create_snapshot(debit))
    if credit is not None and credit.id != debit_account_id:
        snapshots.append(create_snapshot(credit))

    return RelevantAccounts(debit=debit, credit=credit, snapshots=tuple(snapshots))


def apply_transfer(
    snapshots: Sequence[AccountSnapshot],
    debit_account_id: str,
    credit_account_id: str,
    amount: int,
) -> tuple[AccountSnapshot, ...]:
    """Return new snapshots with the transfer applied on top of ``balance_before``."""

    updated: list[AccountSnapshot] = []
    for snapshot in snapshots:
        if snapshot.id == debit_account_id:
            snapshot = snapshot.model_copy(update={"balance": snapshot.balance_before - amount})
        elif snapshot.id == credit_account_id:
            snapshot = snapshot.model_copy(update={"balance": snapshot.balance_before + amount})
        updated.append(snapshot)
    return tuple(updated)
