"""Data contracts for savings projections."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from moneyjar.core.projection import MAX_AMOUNT, MAX_MONTHS


class ProjectionRequest(BaseModel):
    """Inputs the projections page posts to the service."""

    model_config = ConfigDict(extra="forbid")

    userId: str = Field(..., min_length=1)
    startingAmount: float = Field(
        ..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Lump sum at month 0."
    )
    monthlySavings: float = Field(
        ...,
        ge=0,
        le=MAX_AMOUNT,
        allow_inf_nan=False,
        description="Contribution added at the end of each month.",
    )
    months: int = Field(..., ge=1, le=MAX_MONTHS, description="Number of months to project.")
    saveName: Optional[str] = None
    language: Literal["it", "en"] = "it"


class ProjectionResponse(BaseModel):
    """Projected totals, formatted to two decimals, plus the AI commentary."""

    finalAmount: str
    totalDeposits: str
    totalReturn: str
    analysis: str


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    startingAmount: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    monthlySavings: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    months: int = Field(..., ge=1, le=MAX_MONTHS)


class SchedulePoint(BaseModel):
    month: int = Field(..., ge=0)
    deposits: float
    balance: float


class ScheduleResponse(BaseModel):
    annualRate: float
    schedule: List[SchedulePoint]
    finalAmount: float
