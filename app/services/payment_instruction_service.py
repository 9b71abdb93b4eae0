"""Entry point running the payment instruction pipeline."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Sequence

from pydantic import ValidationError as PydanticValidationError

from app.api.errors import ValidationError
from app.payments.accounts import select_relevant_accounts
from app.payments.engine import process_business_rules
from app.payments.grammar import detect_type, extract_token_positions
from app.payments.parser import parse_instruction_tokens
from app.payments.responses import build_error_response, build_unparseable_response
from app.payments.results import Failure
from app.payments.tokenizer import tokenize, uppercase_tokens
from app.schemas.payment import AccountIn, PaymentInstructionRequest, PaymentInstructionResponse

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Current calendar date in UTC."""

    return datetime.now(timezone.utc).date()


class PaymentInstructionService:
    """Parse, validate and price one payment instruction against caller accounts."""

    def __init__(self, today_provider: Callable[[], date] = utc_today) -> None:
        self._today_provider = today_provider

    async def process(self, payload: Any) -> PaymentInstructionResponse:
        """Check the payload shape, then evaluate the instruction.

        Instruction errors come back as ``failed`` verdicts; only a malformed
        payload raises.
        """

        try:
            request = PaymentInstructionRequest.model_validate(payload)
        except PydanticValidationError as exc:
            logger.warning("Rejected payment instruction payload: %s", exc)
            raise ValidationError(f"Invalid payment instruction payload: {exc}") from exc

        return self.evaluate(request.instruction, request.accounts)

    def evaluate(self, instruction: str, accounts: Sequence[AccountIn]) -> PaymentInstructionResponse:
        response = self._run_pipeline(instruction, accounts)
        logger.info(
            "Payment instruction processed | type=%s | status=%s | code=%s",
            response.type.value if response.type else None,
            response.status.value,
            response.status_code.value,
        )
        return response

    def _run_pipeline(self, instruction: str, accounts: Sequence[AccountIn]) -> PaymentInstructionResponse:
        tokens = tokenize(instruction.strip())
        if not tokens:
            return build_unparseable_response()

        upper_tokens = uppercase_tokens(tokens)
        type_ = detect_type(upper_tokens)
        if type_ is None:
            logger.debug("No recognised instruction type in leading token %r", tokens[0])
            return build_unparseable_response()

        parsed = parse_instruction_tokens(type_, tokens, upper_tokens)
        if isinstance(parsed, Failure):
            positions = extract_token_positions(type_, tokens)
            relevant = select_relevant_accounts(accounts, positions.from_account, positions.to_account)
            return build_error_response(parsed.error, type_=type_, accounts=relevant.snapshots)

        return process_business_rules(parsed.value, accounts, self._today_provider())
