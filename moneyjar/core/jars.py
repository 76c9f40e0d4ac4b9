"""Savings jar progress and deposits."""

from __future__ import annotations

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from moneyjar.schemas.jars import DepositResponse, Jar, JarProgress, JarTransaction

DEFAULT_DEPOSIT_DESCRIPTION = "Deposito"


class JarDepositError(ValueError):
    pass


def _one_decimal(value: float) -> float:
    # half-up on the shortest decimal form, so 12.25 reads as 12.3
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def jar_progress(jar: Jar) -> JarProgress:
    percent = jar.currentAmount / jar.targetAmount * 100
    return JarProgress(
        jar=jar,
        percent=_one_decimal(percent),
        remaining=max(0.0, jar.targetAmount - jar.currentAmount),
        completed=percent >= 100,
    )


def deposit(
    jar: Jar,
    amount: float,
    description: Optional[str] = None,
    on: Optional[dt.date] = None,
) -> DepositResponse:
    """Add money to a jar and return the updated jar with its transaction record."""
    if amount <= 0:
        raise JarDepositError("deposit amount must be greater than zero")

    updated = jar.model_copy(update={"currentAmount": jar.currentAmount + amount})
    transaction = JarTransaction(
        jarId=jar.id,
        amount=amount,
        description=description or DEFAULT_DEPOSIT_DESCRIPTION,
        date=on or dt.date.today(),
    )
    return DepositResponse(jar=updated, transaction=transaction, progress=jar_progress(updated))
