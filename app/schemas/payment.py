"""Payment instruction request, verdict and envelope schemas."""

from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import AllowInfNan, BaseModel, Strict, StrictInt, StrictStr

from app.payments.constants import InstructionStatus, StatusCode, TransactionType
from app.schemas.common import FrozenSchema

Number = Union[StrictInt, Annotated[float, Strict(), AllowInfNan(False)]]


class AccountIn(BaseModel):
    """Caller-supplied account; read-only input."""

    id: StrictStr
    balance: Number
    currency: StrictStr


class PaymentInstructionRequest(BaseModel):
    """Top-level payload shape checked before the instruction is parsed."""

    accounts: list[AccountIn]
    instruction: StrictStr


class AccountSnapshot(FrozenSchema):
    """Point-in-time copy of an account used to report balance deltas."""

    id: str
    balance: Number
    balance_before: Number
    currency: str


class PaymentInstructionResponse(FrozenSchema):
    """Structured verdict for one instruction."""

    type: Optional[TransactionType] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: InstructionStatus
    status_reason: str
    status_code: StatusCode
    accounts: tuple[AccountSnapshot, ...] = ()


class PaymentInstructionEnvelope(BaseModel):
    """HTTP response envelope wrapping a verdict."""

    status: int
    message: str
    data: PaymentInstructionResponse
