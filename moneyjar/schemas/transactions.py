"""Income and expense rows as the client sends them."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Income(BaseModel):
    # rows come straight from the hosted tables, so ids and user columns are ignored
    model_config = ConfigDict(extra="ignore")

    amount: float = Field(..., ge=0, allow_inf_nan=False)
    date: dt.date
    source: Optional[str] = None
    description: Optional[str] = None


class Expense(BaseModel):
    model_config = ConfigDict(extra="ignore")

    amount: float = Field(..., ge=0, allow_inf_nan=False)
    date: dt.date
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
