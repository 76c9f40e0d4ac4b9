from __future__ import annotations

import pytest
import requests

from moneyjar.config import Settings
from moneyjar.core.projection import future_value
from moneyjar.services.ai_gateway import (
    AIGatewayClient,
    AIGatewayError,
    GatewayNotConfigured,
    PaymentRequired,
    RateLimitExceeded,
    build_projection_messages,
)


class StubResponse:
    def __init__(self, status_code: int, body: dict | None = None):
        self.status_code = status_code
        self._body = body or {}

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> dict:
        return self._body


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ai_gateway_api_key="secret",
        ai_gateway_url="https://gateway.test/v1/chat/completions",
        ai_model="google/gemini-2.5-flash",
        ai_timeout_seconds=5,
    )


def stub_post(monkeypatch, response: StubResponse) -> list:
    calls = []

    def fake_post(url, **kwargs):
        calls.append({"url": url, **kwargs})
        return response

    monkeypatch.setattr(requests, "post", fake_post)
    return calls


def test_complete_sends_bearer_token_and_returns_content(monkeypatch, settings):
    calls = stub_post(
        monkeypatch,
        StubResponse(200, {"choices": [{"message": {"content": "Ottimo piano."}}]}),
    )
    client = AIGatewayClient(settings)

    text = client.complete([{"role": "user", "content": "ciao"}])

    assert text == "Ottimo piano."
    assert calls[0]["url"] == "https://gateway.test/v1/chat/completions"
    assert calls[0]["headers"]["Authorization"] == "Bearer secret"
    assert calls[0]["json"]["model"] == "google/gemini-2.5-flash"
    assert calls[0]["timeout"] == 5


@pytest.mark.parametrize(
    "status, error",
    [(429, RateLimitExceeded), (402, PaymentRequired), (500, AIGatewayError), (503, AIGatewayError)],
)
def test_upstream_failures_raise_typed_errors(monkeypatch, settings, status, error):
    stub_post(monkeypatch, StubResponse(status))
    client = AIGatewayClient(settings)

    with pytest.raises(error) as exc_info:
        client.complete([{"role": "user", "content": "ciao"}])

    assert exc_info.value.status_code == (status if status in (429, 402) else 500)


def test_missing_key_fails_before_any_request(monkeypatch):
    calls = stub_post(monkeypatch, StubResponse(200))
    client = AIGatewayClient(Settings(_env_file=None, ai_gateway_api_key=None))

    with pytest.raises(GatewayNotConfigured, match="AI_GATEWAY_API_KEY is not configured"):
        client.complete([])

    assert calls == []


def test_transport_errors_propagate(monkeypatch, settings):
    def broken_post(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "post", broken_post)
    client = AIGatewayClient(settings)

    with pytest.raises(requests.ConnectionError):
        client.complete([])


def test_projection_prompt_carries_the_numbers():
    result = future_value(1000.0, 200.0, 18, 0.02)

    messages = build_projection_messages(1000.0, 200.0, 18, result)

    assert [m["role"] for m in messages] == ["system", "user"]
    system = messages[0]["content"]
    assert "Importo iniziale: €1000" in system
    assert "Risparmio mensile: €200" in system
    assert "Periodo: 18 mesi (1.5 anni)" in system
    assert f"Importo finale stimato: €{result.final_amount:.2f}" in system
    assert f"Rendimento totale: €{result.total_return:.2f}" in system


def test_english_prompt():
    result = future_value(0.0, 50.5, 6, 0.02)

    messages = build_projection_messages(0.0, 50.5, 6, result, language="en")

    assert "Monthly savings: €50.5" in messages[0]["content"]
    assert "Period: 6 months (0.5 years)" in messages[0]["content"]
