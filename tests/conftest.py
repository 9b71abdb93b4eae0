from __future__ import annotations

from datetime import date

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from app.api.deps import get_payment_service
from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.config import get_settings
from app.services.payment_instruction_service import PaymentInstructionService

FIXED_TODAY = date(2025, 6, 15)


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("API_PREFIX", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def service() -> PaymentInstructionService:
    """Service whose notion of "today" is pinned."""

    return PaymentInstructionService(today_provider=lambda: FIXED_TODAY)


@pytest.fixture
def accounts() -> list[dict]:
    return [
        {"id": "A1", "balance": 500, "currency": "NGN"},
        {"id": "A2", "balance": 50, "currency": "NGN"},
    ]


@pytest.fixture
def api_app(service: PaymentInstructionService) -> FastAPI:
    """Build API app with the pinned-clock service injected."""

    app = FastAPI()
    app.include_router(api_router)
    register_exception_handlers(app)
    app.dependency_overrides[get_payment_service] = lambda: service
    return app


@pytest_asyncio.fixture
async def api_client(api_app: FastAPI) -> httpx.AsyncClient:
    """ASGI client for API integration tests."""

    transport = httpx.ASGITransport(app=api_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
