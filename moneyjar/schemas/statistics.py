"""Data contracts for the statistics endpoint."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from moneyjar.schemas.budget import BudgetItem
from moneyjar.schemas.transactions import Expense, Income


class StatisticsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    incomes: List[Income] = Field(default_factory=list)
    expenses: List[Expense] = Field(default_factory=list)
    budgetItems: List[BudgetItem] = Field(default_factory=list)
    trendMonths: int = Field(6, ge=1, le=24)


class CategoryTotal(BaseModel):
    name: str
    value: float


class MonthTotals(BaseModel):
    month: str  # YYYY-MM
    income: float
    expenses: float


class CategoryComparison(BaseModel):
    category: str
    planned: float
    actual: float


class IncomeExpenseTotals(BaseModel):
    totalIncome: float
    totalExpenses: float
    totalBudget: float


class StatisticsResponse(BaseModel):
    expensesByCategory: List[CategoryTotal]
    monthlyTrend: List[MonthTotals]
    budgetComparison: List[CategoryComparison]
    totals: IncomeExpenseTotals
