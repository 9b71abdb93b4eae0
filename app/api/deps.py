"""Dependency helpers for API layer."""

from app.services.payment_instruction_service import PaymentInstructionService


def get_payment_service() -> PaymentInstructionService:
    """Build payment instruction service dependency."""

    return PaymentInstructionService()
