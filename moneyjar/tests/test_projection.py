from __future__ import annotations

from math import isclose

import pytest

from moneyjar.core.projection import (
    ProjectionInputError,
    future_value,
    project_schedule,
)


def test_zero_rate_accumulates_deposits_only():
    """
    With no interest, the final amount is the lump sum plus every contribution, exactly.
    """
    result = future_value(starting_amount=1500.0, monthly_savings=75.5, months=37, annual_rate=0.0)

    assert result.final_amount == 1500.0 + 75.5 * 37
    assert result.total_deposits == 1500.0 + 75.5 * 37
    assert result.total_return == 0.0


def test_zero_savings_compounds_principal_only():
    result = future_value(starting_amount=2500.0, monthly_savings=0.0, months=48, annual_rate=0.02)

    assert result.final_amount == 2500.0 * (1 + 0.02 / 12) ** 48
    assert result.total_deposits == 2500.0


def test_reference_plan_one_year():
    """
    1000 up front plus 200 a month for a year at 2%.
    Principal grows to ~1020.18, contributions to ~2422.12.
    """
    result = future_value(starting_amount=1000.0, monthly_savings=200.0, months=12, annual_rate=0.02)

    assert result.total_deposits == 3400.0
    assert isclose(result.final_amount, 3442.31, abs_tol=0.01)
    assert isclose(result.total_return, 42.31, abs_tol=0.01)
    assert f"{result.final_amount:.2f}" == "3442.31"


@pytest.mark.parametrize("months", [1, 12, 240, 600])
def test_zero_inputs_stay_at_zero(months):
    result = future_value(starting_amount=0.0, monthly_savings=0.0, months=months, annual_rate=0.02)

    assert result.final_amount == 0.0
    assert result.total_deposits == 0.0
    assert result.total_return == 0.0


@pytest.mark.parametrize(
    "starting, savings, months, rate",
    [
        (0.0, 100.0, 1, 0.02),
        (10000.0, 0.0, 360, 0.05),
        (123.45, 67.89, 99, 0.02),
        (500.0, 250.0, 600, 0.0),
    ],
)
def test_totals_are_consistent(starting, savings, months, rate):
    result = future_value(starting, savings, months, rate)

    assert result.total_deposits == starting + savings * months
    assert result.total_return == result.final_amount - result.total_deposits


def test_longer_horizon_grows_balance():
    previous = 0.0
    for months in range(1, 601):
        current = future_value(1000.0, 50.0, months, 0.02).final_amount
        assert current > previous, f"balance should increase at month {months}"
        previous = current


def test_schedule_matches_closed_form():
    rows = project_schedule(starting_amount=1000.0, monthly_savings=200.0, months=12, annual_rate=0.02)
    closed = future_value(1000.0, 200.0, 12, 0.02)

    assert [row.month for row in rows] == list(range(0, 13))
    assert rows[0].balance == 1000.0
    assert isclose(rows[-1].balance, closed.final_amount, rel_tol=1e-9)
    assert isclose(rows[-1].deposits, closed.total_deposits, rel_tol=1e-12)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"starting_amount": -1.0, "monthly_savings": 0.0, "months": 12, "annual_rate": 0.02}, "starting_amount"),
        ({"starting_amount": 0.0, "monthly_savings": -5.0, "months": 12, "annual_rate": 0.02}, "monthly_savings"),
        ({"starting_amount": 0.0, "monthly_savings": 5.0, "months": 0, "annual_rate": 0.02}, "months"),
        ({"starting_amount": 0.0, "monthly_savings": 5.0, "months": 12, "annual_rate": -0.01}, "annual_rate"),
    ],
)
def test_invalid_inputs_raise(kwargs, message):
    with pytest.raises(ProjectionInputError, match=message):
        future_value(**kwargs)


def test_overflowing_amounts_raise_instead_of_returning_inf():
    with pytest.raises(ProjectionInputError, match="overflows"):
        future_value(starting_amount=1e308, monthly_savings=1e308, months=600, annual_rate=0.02)

    with pytest.raises(ProjectionInputError, match="overflows"):
        project_schedule(starting_amount=1e308, monthly_savings=0.0, months=600, annual_rate=0.02)


def test_overflowing_rate_raises():
    with pytest.raises(ProjectionInputError, match="overflows"):
        future_value(starting_amount=1.0, monthly_savings=1.0, months=600, annual_rate=1e6)
