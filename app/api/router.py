"""Top-level API router aggregation."""

from fastapi import APIRouter

from app.api.routes.payment_instructions import router as payment_instructions_router

api_router = APIRouter()
api_router.include_router(payment_instructions_router)
