"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

import structlog
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from moneyjar.core.budget import summarize_budget
from moneyjar.core.insights import build_dashboard
from moneyjar.core.jars import JarDepositError, deposit, jar_progress
from moneyjar.core.ping import get_ping_message
from moneyjar.core.projection import ProjectionInputError, future_value, project_schedule
from moneyjar.core.statistics import build_statistics
from moneyjar.schemas.budget import BudgetSummaryRequest
from moneyjar.schemas.dashboard import DashboardRequest
from moneyjar.schemas.jars import DepositRequest, JarProgressRequest
from moneyjar.schemas.ping import PingResponse
from moneyjar.schemas.projection import (
    ProjectionRequest,
    ProjectionResponse,
    SchedulePoint,
    ScheduleRequest,
    ScheduleResponse,
)
from moneyjar.schemas.statistics import StatisticsRequest
from moneyjar.services.ai_gateway import AIGatewayError

api_bp = Blueprint("api", __name__)
logger = structlog.get_logger(__name__)


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _settings():
    return current_app.extensions["moneyjar.settings"]


def _gateway():
    return current_app.extensions["moneyjar.gateway"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(ProjectionInputError)
@api_bp.errorhandler(JarDepositError)
def _handle_domain_error(exc: ValueError):
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(AIGatewayError)
def _handle_gateway_error(exc: AIGatewayError):
    logger.warning("projection_analysis_failed", status=exc.status_code, error=exc.message)
    return jsonify({"error": exc.message}), exc.status_code


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("unhandled_error", error=str(exc))
    return jsonify({"error": str(exc)}), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project savings at the fixed annual rate and attach the AI analysis."""
    payload = ProjectionRequest.model_validate(_payload())
    result = future_value(
        starting_amount=payload.startingAmount,
        monthly_savings=payload.monthlySavings,
        months=payload.months,
        annual_rate=_settings().projection_annual_rate,
    )
    logger.info(
        "projection_calculated",
        user_id=payload.userId,
        months=payload.months,
        save_name=payload.saveName,
    )

    analysis = _gateway().analyse_projection(
        payload.startingAmount,
        payload.monthlySavings,
        payload.months,
        result,
        language=payload.language,
    )

    response = ProjectionResponse(
        finalAmount=f"{result.final_amount:.2f}",
        totalDeposits=f"{result.total_deposits:.2f}",
        totalReturn=f"{result.total_return:.2f}",
        analysis=analysis,
    )
    return jsonify(response.model_dump()), HTTPStatus.OK


@api_bp.post("/projection/schedule")
def projection_schedule() -> Any:
    """Month-by-month balances for charting; no AI call."""
    payload = ScheduleRequest.model_validate(_payload())
    annual_rate = _settings().projection_annual_rate
    rows = project_schedule(payload.startingAmount, payload.monthlySavings, payload.months, annual_rate)
    response = ScheduleResponse(
        annualRate=annual_rate,
        schedule=[SchedulePoint(month=r.month, deposits=r.deposits, balance=r.balance) for r in rows],
        finalAmount=rows[-1].balance,
    )
    return jsonify(response.model_dump())


@api_bp.post("/budget/summary")
def budget_summary() -> Any:
    payload = BudgetSummaryRequest.model_validate(_payload())
    return jsonify(summarize_budget(payload.items).model_dump(mode="json"))


@api_bp.post("/statistics")
def statistics() -> Any:
    payload = StatisticsRequest.model_validate(_payload())
    return jsonify(build_statistics(payload).model_dump(mode="json"))


@api_bp.post("/dashboard")
def dashboard() -> Any:
    payload = DashboardRequest.model_validate(_payload())
    return jsonify(build_dashboard(payload).model_dump(mode="json"))


@api_bp.post("/jars/progress")
def jars_progress() -> Any:
    payload = JarProgressRequest.model_validate(_payload())
    return jsonify([jar_progress(jar).model_dump(mode="json") for jar in payload.jars])


@api_bp.post("/jars/deposit")
def jars_deposit() -> Any:
    payload = DepositRequest.model_validate(_payload())
    result = deposit(payload.jar, payload.amount, payload.description, payload.date)
    logger.info("jar_deposit", jar_id=payload.jar.id, amount=payload.amount)
    return jsonify(result.model_dump(mode="json"))
