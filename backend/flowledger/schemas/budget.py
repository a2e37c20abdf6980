"""
Budget comparison schemas.
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List

from flowledger.models.transaction import TransactionType


class BudgetRow(BaseModel):
    category: str
    budget: float
    tracked: float
    percent_used: float
    remaining: float


class BudgetComparison(BaseModel):
    per_category: List[BudgetRow]
    total_budget: float
    total_tracked: float
    total_remaining: float
    over_budget: bool


class BudgetSection(BaseModel):
    title: str
    type: TransactionType
    comparison: BudgetComparison


class BudgetOverview(BaseModel):
    month: str
    sections: List[BudgetSection]


class BudgetUpdate(BaseModel):
    amount: Decimal = Field(..., ge=0, allow_inf_nan=False)
