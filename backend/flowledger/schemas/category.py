"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from typing import Dict, List


class CategoryLists(BaseModel):
    """The three category lists, in display order."""
    income_categories: List[str] = Field(default_factory=list)
    expense_categories: List[str] = Field(default_factory=list)
    investment_categories: List[str] = Field(default_factory=list)


class CategoryResponse(CategoryLists):
    """Category lists plus the budget targets."""
    budgets: Dict[str, float] = Field(default_factory=dict)
    category_colors: Dict[str, str] = Field(default_factory=dict)


class BudgetValue(BaseModel):
    category: str
    amount: float
