from __future__ import annotations

from typing import List

import pytest
from flask.testing import FlaskClient

from moneyjar.app import create_app
from moneyjar.config import Settings
from moneyjar.core.projection import ProjectionResult


class FakeGateway:
    """Stands in for AIGatewayClient; records calls and returns canned text or raises."""

    def __init__(self, analysis: str = "Piano sostenibile.", error: Exception | None = None):
        self.analysis = analysis
        self.error = error
        self.calls: List[dict] = []

    def analyse_projection(
        self,
        starting_amount: float,
        monthly_savings: float,
        months: int,
        result: ProjectionResult,
        language: str = "it",
    ) -> str:
        self.calls.append(
            {
                "starting_amount": starting_amount,
                "monthly_savings": monthly_savings,
                "months": months,
                "result": result,
                "language": language,
            }
        )
        if self.error is not None:
            raise self.error
        return self.analysis


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ai_gateway_api_key="test-key",
        ai_gateway_url="https://gateway.test/v1/chat/completions",
        projection_annual_rate=0.02,
        cors_origins="*",
    )


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def client(settings: Settings, gateway: FakeGateway) -> FlaskClient:
    app = create_app(settings=settings, gateway=gateway)
    with app.test_client() as test_client:
        yield test_client
