"""Dashboard totals and the one-line savings insight shown under them."""

from __future__ import annotations

import math
from typing import Optional

from moneyjar.core.statistics import expenses_by_category
from moneyjar.schemas.dashboard import DashboardRequest, DashboardResponse, TopCategory


def _percent(value: float) -> int:
    # half-up, so 12.5 reads as 13%
    return int(math.floor(value + 0.5))


def generate_insight(
    income: float,
    expenses: float,
    savings: float,
    top_category: Optional[TopCategory] = None,
) -> str:
    """Pick a message from the savings-rate ladder."""
    if income == 0 and expenses == 0:
        return "Start adding your income and expenses to unlock personalized insights!"

    balance = income - expenses
    savings_rate = (balance / income) * 100 if income > 0 else 0.0

    if expenses > income:
        overspend = expenses - income
        if top_category and top_category.amount > overspend:
            return (
                f"⚠️ Alert: You're spending €{overspend:.2f} more than you earn! "
                f"Your top expense is {top_category.name} (€{top_category.amount:.2f}). "
                "Consider reducing this category."
            )
        return (
            f"⚠️ Alert: You're overspending by €{overspend:.2f}. Review your expenses "
            "and cut back on non-essentials to get back on track."
        )

    if savings_rate > 30:
        return (
            f"🚀 Outstanding! You're saving {_percent(savings_rate)}% of your income "
            f"(€{balance:.2f}). You're on the fast track to financial freedom!"
        )
    if savings_rate > 20:
        return f"✅ Excellent! You're saving {_percent(savings_rate)}% of your income. Keep up this great habit!"
    if savings_rate > 10:
        return (
            f"💪 Good progress! You're saving {_percent(savings_rate)}% of your income. "
            "Try to reach 20% for optimal financial health."
        )
    if savings_rate > 0:
        if top_category:
            return (
                f"💡 You're saving {_percent(savings_rate)}% (€{balance:.2f}). "
                f"Your biggest expense is {top_category.name} (€{top_category.amount:.2f}). "
                "Could you reduce it by 10%?"
            )
        return (
            f"💡 You're saving {_percent(savings_rate)}%. Try to increase this to at least 10% "
            "by reviewing your expenses."
        )

    return "⚖️ You're breaking even. Start by saving just 5% of your income - small steps lead to big results!"


def build_dashboard(request: DashboardRequest) -> DashboardResponse:
    total_income = sum(i.amount for i in request.incomes)
    total_expenses = sum(e.amount for e in request.expenses)
    total_savings = sum(j.currentAmount for j in request.jars)

    categories = expenses_by_category(request.expenses)
    top = max(categories, key=lambda c: c.value, default=None)
    top_category = TopCategory(name=top.name, amount=top.value) if top else None

    return DashboardResponse(
        totalIncome=total_income,
        totalExpenses=total_expenses,
        balance=total_income - total_expenses,
        totalSavings=total_savings,
        topCategory=top_category,
        insight=generate_insight(total_income, total_expenses, total_savings, top_category),
    )
