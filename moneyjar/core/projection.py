from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

MAX_MONTHS = 600
# results stay finite for MAX_MONTHS at annual rates up to 100%
MAX_AMOUNT = 1e12


class ProjectionInputError(ValueError):
    """Raised when the calculator receives values outside its contract."""


@dataclass(frozen=True)
class ProjectionResult:
    final_amount: float
    total_deposits: float
    total_return: float


@dataclass(frozen=True)
class ScheduleRow:
    month: int
    deposits: float
    balance: float


def _check_inputs(starting_amount: float, monthly_savings: float, months: int, annual_rate: float) -> None:
    errors: List[str] = []
    if starting_amount < 0:
        errors.append("starting_amount must be >= 0")
    if monthly_savings < 0:
        errors.append("monthly_savings must be >= 0")
    if months < 1:
        errors.append("months must be >= 1")
    if annual_rate < 0:
        errors.append("annual_rate must be >= 0")
    if errors:
        raise ProjectionInputError("; ".join(errors))


def monthly_rate(annual_rate: float) -> float:
    return annual_rate / 12


def future_value(
    starting_amount: float,
    monthly_savings: float,
    months: int,
    annual_rate: float,
) -> ProjectionResult:
    """
    Future value of a lump sum plus equal end-of-month contributions.

    Compounding is monthly at annual_rate / 12. A zero rate means no growth:
    the contributions term collapses to monthly_savings * months, which is
    the limit of the closed form as the rate goes to zero.
    """
    _check_inputs(starting_amount, monthly_savings, months, annual_rate)

    rate = monthly_rate(annual_rate)
    try:
        growth = (1 + rate) ** months
    except OverflowError as exc:
        raise ProjectionInputError("projection overflows; rate is too large") from exc

    if rate == 0:
        contributions_fv = monthly_savings * months
    else:
        contributions_fv = monthly_savings * ((growth - 1) / rate)
    principal_fv = starting_amount * growth

    final_amount = contributions_fv + principal_fv
    total_deposits = starting_amount + monthly_savings * months
    if not (math.isfinite(final_amount) and math.isfinite(total_deposits)):
        raise ProjectionInputError("projection overflows; amounts are too large")
    return ProjectionResult(
        final_amount=final_amount,
        total_deposits=total_deposits,
        total_return=final_amount - total_deposits,
    )


def project_schedule(
    starting_amount: float,
    monthly_savings: float,
    months: int,
    annual_rate: float,
) -> List[ScheduleRow]:
    """
    Month-by-month balances for months 0..N.

    Order of operations (per month):
      1) Apply one month of growth to the opening balance.
      2) Add the month's contribution (not grown this month).
    """
    _check_inputs(starting_amount, monthly_savings, months, annual_rate)

    rate = monthly_rate(annual_rate)
    balance = float(starting_amount)
    deposits = float(starting_amount)

    rows: List[ScheduleRow] = [ScheduleRow(month=0, deposits=deposits, balance=balance)]
    for month in range(1, months + 1):
        balance = balance * (1 + rate) + monthly_savings
        deposits += monthly_savings
        rows.append(ScheduleRow(month=month, deposits=deposits, balance=balance))

    if not math.isfinite(balance):
        raise ProjectionInputError("projection overflows; amounts are too large")

    return rows


__all__ = [
    "MAX_AMOUNT",
    "MAX_MONTHS",
    "ProjectionInputError",
    "ProjectionResult",
    "ScheduleRow",
    "monthly_rate",
    "future_value",
    "project_schedule",
]
