"""Recurring budget items normalised to monthly and annual amounts."""

from __future__ import annotations

from typing import Dict, Iterable, List

from moneyjar.schemas.budget import (
    BudgetItem,
    BudgetSummary,
    BudgetTotals,
    Frequency,
    NormalizedBudgetItem,
)

# occurrences per year
FREQUENCY_MULTIPLIERS: Dict[Frequency, int] = {
    Frequency.WEEKLY: 52,
    Frequency.MONTHLY: 12,
    Frequency.BIMONTHLY: 6,
    Frequency.QUARTERLY: 4,
    Frequency.SEMIANNUAL: 2,
    Frequency.ANNUAL: 1,
}


def annual_amount(amount: float, frequency: Frequency) -> float:
    return amount * FREQUENCY_MULTIPLIERS[frequency]


def normalize_item(item: BudgetItem) -> NormalizedBudgetItem:
    """Attach the monthly and annual equivalents of a budget item."""
    annual = annual_amount(item.amount, item.frequency)
    return NormalizedBudgetItem(
        **item.model_dump(),
        monthlyAmount=annual / 12,
        annualAmount=annual,
    )


def summarize_budget(items: Iterable[BudgetItem]) -> BudgetSummary:
    normalized: List[NormalizedBudgetItem] = [normalize_item(item) for item in items]

    monthly_income = sum(i.monthlyAmount for i in normalized if i.type == "income")
    monthly_expenses = sum(i.monthlyAmount for i in normalized if i.type == "expense")

    return BudgetSummary(
        items=normalized,
        totals=BudgetTotals(
            monthlyIncome=monthly_income,
            monthlyExpenses=monthly_expenses,
            monthlyBalance=monthly_income - monthly_expenses,
            annualIncome=monthly_income * 12,
            annualExpenses=monthly_expenses * 12,
        ),
    )
