"""
Category lists, budgets and per-category accumulators.
"""

from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel, Field

from flowledger.models.transaction import TransactionType


class CategoryTotals(dict):
    """Ordered category -> amount mapping that reads missing keys as zero.

    Lookups of unknown categories do not insert them.
    """

    def __missing__(self, key: str) -> Decimal:
        return Decimal("0")

    def add(self, category: str, amount: Decimal) -> None:
        self[category] = self[category] + amount


class CategorySettings(BaseModel):
    """The three disjoint category lists plus the monthly budget targets."""

    income_categories: List[str] = Field(default_factory=list)
    expense_categories: List[str] = Field(default_factory=list)
    investment_categories: List[str] = Field(default_factory=list)
    budgets: Dict[str, Decimal] = Field(default_factory=dict)

    def budget_for(self, category: str) -> Decimal:
        return self.budgets.get(category, Decimal("0"))

    def categories_for(self, transaction_type: TransactionType) -> List[str]:
        if transaction_type == TransactionType.income:
            return self.income_categories
        elif transaction_type == TransactionType.expense:
            return self.expense_categories
        else:
            return self.investment_categories
