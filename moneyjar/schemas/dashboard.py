"""Data contracts for the dashboard summary."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from moneyjar.schemas.jars import Jar
from moneyjar.schemas.transactions import Expense, Income


class DashboardRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    incomes: List[Income] = Field(default_factory=list)
    expenses: List[Expense] = Field(default_factory=list)
    jars: List[Jar] = Field(default_factory=list)


class TopCategory(BaseModel):
    name: str
    amount: float


class DashboardResponse(BaseModel):
    totalIncome: float
    totalExpenses: float
    balance: float
    totalSavings: float
    topCategory: Optional[TopCategory] = None
    insight: str
