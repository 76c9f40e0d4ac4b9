"""Data contracts for savings jars."""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Jar(BaseModel):
    """A named savings goal."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    targetAmount: float = Field(..., gt=0, allow_inf_nan=False)
    currentAmount: float = Field(0.0, ge=0, allow_inf_nan=False)


class JarProgress(BaseModel):
    jar: Jar
    percent: float
    remaining: float
    completed: bool


class JarProgressRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    jars: List[Jar] = Field(default_factory=list)


class JarTransaction(BaseModel):
    jarId: Optional[str] = None
    amount: float
    description: str
    date: dt.date


class DepositRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    jar: Jar
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    description: Optional[str] = None
    date: Optional[dt.date] = None


class DepositResponse(BaseModel):
    jar: Jar
    transaction: JarTransaction
    progress: JarProgress
