from __future__ import annotations

import pytest

from app.main import create_app

DEBIT_TEXT = "DEBIT 100 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT A2"


@pytest.mark.asyncio
async def test_successful_instruction_returns_200_envelope(api_client, accounts) -> None:
    response = await api_client.post("/payment-instructions", json={"instruction": DEBIT_TEXT, "accounts": accounts})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == 200
    assert body["message"] == "Transaction executed successfully"
    data = body["data"]
    assert data["status"] == "successful"
    assert data["status_code"] == "AP00"
    assert data["type"] == "DEBIT"
    assert data["accounts"] == [
        {"id": "A1", "balance": 400, "balance_before": 500, "currency": "NGN"},
        {"id": "A2", "balance": 150, "balance_before": 50, "currency": "NGN"},
    ]


@pytest.mark.asyncio
async def test_pending_instruction_returns_200(api_client, accounts) -> None:
    response = await api_client.post(
        "/payment-instructions",
        json={"instruction": f"{DEBIT_TEXT} ON 2099-01-01", "accounts": accounts},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["status"] == "pending"
    assert body["data"]["status_code"] == "AP02"
    assert body["data"]["execute_by"] == "2099-01-01"


@pytest.mark.asyncio
async def test_failed_instruction_returns_400(api_client, accounts) -> None:
    response = await api_client.post("/payment-instructions", json={"instruction": "", "accounts": accounts})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["data"]["status_code"] == "SY03"
    assert body["data"]["type"] is None
    assert body["message"] == body["data"]["status_reason"]


@pytest.mark.asyncio
async def test_insufficient_funds_message_names_the_account(api_client, accounts) -> None:
    accounts[0]["balance"] = 50

    response = await api_client.post("/payment-instructions", json={"instruction": DEBIT_TEXT, "accounts": accounts})

    assert response.status_code == 400
    body = response.json()
    assert body["data"]["status_code"] == "AC01"
    assert body["message"].endswith("in account A1: has 50 NGN, needs 100 NGN")


@pytest.mark.asyncio
async def test_malformed_payload_returns_422(api_client) -> None:
    response = await api_client.post("/payment-instructions", json={"instruction": DEBIT_TEXT})

    assert response.status_code == 422
    assert response.json()["detail"].startswith("Invalid payment instruction payload")


@pytest.mark.asyncio
async def test_non_finite_balance_is_rejected_as_malformed(api_client) -> None:
    body = (
        '{"instruction": "' + DEBIT_TEXT + '", '
        '"accounts": [{"id": "A1", "balance": NaN, "currency": "NGN"}, '
        '{"id": "A2", "balance": 50, "currency": "NGN"}]}'
    )

    response = await api_client.post(
        "/payment-instructions", content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422
    assert response.json()["detail"].startswith("Invalid payment instruction payload")


def test_create_app_exposes_health_and_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from app.config import get_settings

    monkeypatch.setenv("APP_NAME", "Test Engine")
    monkeypatch.setenv("API_PREFIX", "/api/v1")
    get_settings.cache_clear()

    app = create_app()
    paths = {route.path for route in app.routes}

    assert app.title == "Test Engine"
    assert "/health" in paths
    assert "/api/v1/payment-instructions" in paths
