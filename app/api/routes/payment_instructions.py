"""Payment instruction endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_payment_service
from app.payments import messages
from app.payments.constants import InstructionStatus, StatusCode
from app.schemas.payment import PaymentInstructionEnvelope, PaymentInstructionResponse
from app.services.payment_instruction_service import PaymentInstructionService
from app.utils.formatters import format_amount

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])


def build_envelope(response: PaymentInstructionResponse) -> PaymentInstructionEnvelope:
    """Map a verdict onto the HTTP status and a human-readable message."""

    if response.status == InstructionStatus.FAILED:
        return PaymentInstructionEnvelope(status=400, message=_failure_message(response), data=response)
    if response.status == InstructionStatus.PENDING:
        message = response.status_reason or messages.HTTP_DEFAULT_PENDING
    else:
        message = response.status_reason or messages.HTTP_DEFAULT_SUCCESSFUL
    return PaymentInstructionEnvelope(status=200, message=message, data=response)


def _failure_message(response: PaymentInstructionResponse) -> str:
    if response.status_code == StatusCode.INSUFFICIENT_FUNDS:
        debit = next((account for account in response.accounts if account.id == response.debit_account), None)
        if debit is not None:
            return (
                f"{response.status_reason} in account {debit.id}: has {format_amount(debit.balance)} "
                f"{debit.currency}, needs {response.amount} {response.currency}"
            )
    return response.status_reason or messages.HTTP_DEFAULT_FAILED


@router.post("", response_model=PaymentInstructionEnvelope)
async def process_payment_instruction(
    payload: Any = Body(...),
    service: PaymentInstructionService = Depends(get_payment_service),
) -> JSONResponse:
    """Parse a free-text instruction and return the transfer verdict."""

    response = await service.process(payload)
    envelope = build_envelope(response)
    logger.info(
        "payment-instruction-request-completed | status=%s | code=%s",
        envelope.status,
        response.status_code.value,
    )
    return JSONResponse(status_code=envelope.status, content=envelope.model_dump(mode="json"))
