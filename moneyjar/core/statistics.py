from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from moneyjar.core.budget import normalize_item
from moneyjar.schemas.budget import BudgetItem
from moneyjar.schemas.statistics import (
    CategoryComparison,
    CategoryTotal,
    IncomeExpenseTotals,
    MonthTotals,
    StatisticsRequest,
    StatisticsResponse,
)
from moneyjar.schemas.transactions import Expense, Income


def month_key(value) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def expenses_by_category(
    expenses: Iterable[Expense],
    budget_items: Iterable[BudgetItem] = (),
) -> List[CategoryTotal]:
    """
    Planned expense items and actual expenses summed per category.

    Categories keep first-seen order, planned items first.
    """
    totals: Dict[str, float] = {}
    for item in budget_items:
        if item.type != "expense":
            continue
        totals[item.category] = totals.get(item.category, 0.0) + item.amount
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, 0.0) + expense.amount

    return [CategoryTotal(name=name, value=value) for name, value in totals.items()]


def monthly_trend(
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    limit: int = 6,
) -> List[MonthTotals]:
    """Income and expense totals per calendar month, oldest first, last `limit` months."""
    buckets: Dict[str, List[float]] = {}
    for income in incomes:
        bucket = buckets.setdefault(month_key(income.date), [0.0, 0.0])
        bucket[0] += income.amount
    for expense in expenses:
        bucket = buckets.setdefault(month_key(expense.date), [0.0, 0.0])
        bucket[1] += expense.amount

    months = sorted(buckets)[-limit:]
    return [
        MonthTotals(month=month, income=buckets[month][0], expenses=buckets[month][1])
        for month in months
    ]


def budget_comparison(
    budget_items: Iterable[BudgetItem],
    expenses: Sequence[Expense],
) -> List[CategoryComparison]:
    """Planned monthly amount of each expense item against what was actually spent."""
    rows: List[CategoryComparison] = []
    for item in budget_items:
        if item.type != "expense":
            continue
        actual = sum(e.amount for e in expenses if e.category == item.category)
        rows.append(
            CategoryComparison(
                category=item.category,
                planned=normalize_item(item).monthlyAmount,
                actual=actual,
            )
        )
    return rows


def income_expense_totals(
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    budget_items: Iterable[BudgetItem] = (),
) -> IncomeExpenseTotals:
    return IncomeExpenseTotals(
        totalIncome=sum(i.amount for i in incomes),
        totalExpenses=sum(e.amount for e in expenses),
        totalBudget=sum(
            normalize_item(item).monthlyAmount for item in budget_items if item.type == "expense"
        ),
    )


def build_statistics(request: StatisticsRequest) -> StatisticsResponse:
    return StatisticsResponse(
        expensesByCategory=expenses_by_category(request.expenses, request.budgetItems),
        monthlyTrend=monthly_trend(request.incomes, request.expenses, request.trendMonths),
        budgetComparison=budget_comparison(request.budgetItems, request.expenses),
        totals=income_expense_totals(request.incomes, request.expenses, request.budgetItems),
    )
