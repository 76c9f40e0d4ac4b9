"""Data contracts for recurring budget items."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class Frequency(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"


class BudgetItem(BaseModel):
    """A planned income or expense that repeats with a fixed frequency."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["income", "expense"]
    category: str = Field(..., min_length=1)
    description: str = ""
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    frequency: Frequency = Frequency.MONTHLY


class NormalizedBudgetItem(BudgetItem):
    monthlyAmount: float
    annualAmount: float


class BudgetTotals(BaseModel):
    monthlyIncome: float
    monthlyExpenses: float
    monthlyBalance: float
    annualIncome: float
    annualExpenses: float


class BudgetSummaryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    items: List[BudgetItem] = Field(default_factory=list)


class BudgetSummary(BaseModel):
    items: List[NormalizedBudgetItem]
    totals: BudgetTotals
