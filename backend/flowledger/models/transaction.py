"""
Transaction domain model.
"""

import enum
import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Exclusive bound on the magnitude of any amount.
AMOUNT_LIMIT = Decimal("1e15")


class TransactionType(str, enum.Enum):
    """Transaction type enumeration."""
    income = "income"
    expense = "expense"
    investment = "investment"


class Transaction(BaseModel):
    """A single ledger entry.

    Amounts are signed: income positive, expenses usually stored negative.
    Investment amounts are read as absolute values by every aggregation.
    Records are frozen; edits go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    date: datetime.date
    amount: Decimal = Field(allow_inf_nan=False, gt=-AMOUNT_LIMIT, lt=AMOUNT_LIMIT)
    category: str
    type: TransactionType
    note: Optional[str] = None
