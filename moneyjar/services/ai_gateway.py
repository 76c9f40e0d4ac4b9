"""
Client for the hosted chat-completions gateway.

One POST per call, no retries. The projection endpoint only forwards the
computed numbers and relays whatever text comes back; throttling and billing
failures upstream surface as typed errors so the HTTP layer can answer with
the matching status code.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
import structlog

from moneyjar.config import Settings
from moneyjar.core.projection import ProjectionResult

logger = structlog.get_logger(__name__)


class AIGatewayError(Exception):
    """Upstream failure with the HTTP status the service should answer with."""

    status_code = 500

    def __init__(self, message: str = "AI gateway error"):
        super().__init__(message)
        self.message = message


class RateLimitExceeded(AIGatewayError):
    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message)


class PaymentRequired(AIGatewayError):
    status_code = 402

    def __init__(self, message: str = "Payment required"):
        super().__init__(message)


class GatewayNotConfigured(AIGatewayError):
    def __init__(self, message: str = "AI_GATEWAY_API_KEY is not configured"):
        super().__init__(message)


PROMPTS = {
    "it": {
        "system": (
            "Sei un consulente finanziario esperto. Analizza questa proiezione di risparmio "
            "e fornisci un'analisi dettagliata:\n\n"
            "Importo iniziale: €{starting_amount}\n"
            "Risparmio mensile: €{monthly_savings}\n"
            "Periodo: {months} mesi ({years:.1f} anni)\n"
            "Importo finale stimato: €{final_amount:.2f}\n"
            "Rendimento totale: €{total_return:.2f}\n\n"
            "Fornisci un'analisi che includa:\n"
            "1. Valutazione della sostenibilità del piano\n"
            "2. Suggerimenti per ottimizzare il risparmio\n"
            "3. Rischi e considerazioni\n"
            "4. Milestone intermedi consigliati"
        ),
        "user": "Analizza questa proiezione finanziaria e fornisci consigli.",
    },
    "en": {
        "system": (
            "You are an expert financial advisor. Analyse this savings projection "
            "and provide a detailed analysis:\n\n"
            "Starting amount: €{starting_amount}\n"
            "Monthly savings: €{monthly_savings}\n"
            "Period: {months} months ({years:.1f} years)\n"
            "Estimated final amount: €{final_amount:.2f}\n"
            "Total return: €{total_return:.2f}\n\n"
            "Provide an analysis that includes:\n"
            "1. Assessment of the plan's sustainability\n"
            "2. Tips to optimise savings\n"
            "3. Risks and considerations\n"
            "4. Recommended intermediate milestones"
        ),
        "user": "Analyse this financial projection and give advice.",
    },
}


def _amount(value: float) -> str:
    # 1000.0 -> "1000", 12.5 -> "12.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def build_projection_messages(
    starting_amount: float,
    monthly_savings: float,
    months: int,
    result: ProjectionResult,
    language: str = "it",
) -> List[Dict[str, str]]:
    prompts = PROMPTS.get(language, PROMPTS["it"])
    system = prompts["system"].format(
        starting_amount=_amount(starting_amount),
        monthly_savings=_amount(monthly_savings),
        months=months,
        years=months / 12,
        final_amount=result.final_amount,
        total_return=result.total_return,
    )
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": prompts["user"]},
    ]


class AIGatewayClient:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self._settings = settings
        self._session = session

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """Send one chat-completions request and return the first choice's text."""
        api_key = self._settings.ai_gateway_api_key
        if not api_key:
            raise GatewayNotConfigured()

        post = self._session.post if self._session is not None else requests.post
        response = post(
            self._settings.ai_gateway_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={"model": self._settings.ai_model, "messages": messages},
            timeout=self._settings.ai_timeout_seconds,
        )

        if not response.ok:
            logger.warning("ai_gateway_error", status=response.status_code)
            if response.status_code == 429:
                raise RateLimitExceeded()
            if response.status_code == 402:
                raise PaymentRequired()
            raise AIGatewayError()

        data: Dict[str, Any] = response.json()
        return data["choices"][0]["message"]["content"]

    def analyse_projection(
        self,
        starting_amount: float,
        monthly_savings: float,
        months: int,
        result: ProjectionResult,
        language: str = "it",
    ) -> str:
        messages = build_projection_messages(starting_amount, monthly_savings, months, result, language)
        return self.complete(messages)
