"""Final verdict builders."""

from __future__ import annotations

from typing import Optional, Sequence

from app.payments import messages
from app.payments.accounts import apply_transfer
from app.payments.constants import InstructionStatus, StatusCode, TransactionType
from app.payments.results import InstructionError, ParsedInstruction
from app.schemas.payment import AccountSnapshot, PaymentInstructionResponse
from app.validators.business import StatusInfo


def build_unparseable_response() -> PaymentInstructionResponse:
    return PaymentInstructionResponse(
        status=InstructionStatus.FAILED,
        status_reason=messages.MALFORMED_INSTRUCTION,
        status_code=StatusCode.MALFORMED,
    )


def build_error_response(
    error: InstructionError,
    parsed: Optional[ParsedInstruction] = None,
    type_: Optional[TransactionType] = None,
    accounts: Sequence[AccountSnapshot] = (),
) -> PaymentInstructionResponse:
    """Failed verdict echoing whatever instruction fields are known."""

    fields = {"type": type_}
    if parsed is not None:
        fields = {
            "type": parsed.type,
            "amount": parsed.amount,
            "currency": parsed.currency,
            "debit_account": parsed.debit_account,
            "credit_account": parsed.credit_account,
            "execute_by": parsed.execute_by,
        }

    return PaymentInstructionResponse(
        **fields,
        status=InstructionStatus.FAILED,
        status_reason=error.message,
        status_code=error.code,
        accounts=tuple(accounts),
    )


def build_verdict_response(
    parsed: ParsedInstruction,
    status_info: StatusInfo,
    snapshots: Sequence[AccountSnapshot],
) -> PaymentInstructionResponse:
    """Successful or pending verdict; balances move only when successful."""

    accounts = tuple(snapshots)
    if status_info.status == InstructionStatus.SUCCESSFUL:
        accounts = apply_transfer(snapshots, parsed.debit_account, parsed.credit_account, parsed.amount)

    return PaymentInstructionResponse(
        type=parsed.type,
        amount=parsed.amount,
        currency=parsed.currency,
        debit_account=parsed.debit_account,
        credit_account=parsed.credit_account,
        execute_by=parsed.execute_by,
        status=status_info.status,
        status_reason=status_info.status_reason,
        status_code=status_info.status_code,
        accounts=accounts,
    )
