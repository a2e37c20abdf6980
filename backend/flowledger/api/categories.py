"""
Category and budget target API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from flowledger.config import settings
from flowledger.dependencies import get_ledger
from flowledger.ledger import Ledger
from flowledger.schemas.budget import BudgetUpdate
from flowledger.schemas.category import BudgetValue, CategoryLists, CategoryResponse
from flowledger.services.color_service import category_colors

router = APIRouter(prefix="/categories", tags=["categories"])


def build_category_response(ledger: Ledger) -> CategoryResponse:
    categories = ledger.categories
    return CategoryResponse(
        income_categories=categories.income_categories,
        expense_categories=categories.expense_categories,
        investment_categories=categories.investment_categories,
        budgets={name: float(amount) for name, amount in categories.budgets.items()},
        category_colors=category_colors(categories.expense_categories, settings.expense_base_color),
    )


@router.get("", response_model=CategoryResponse)
def get_categories(ledger: Ledger = Depends(get_ledger)):
    """Get the three category lists with their budgets."""
    return build_category_response(ledger)


@router.put("", response_model=CategoryResponse)
def replace_categories(
    lists: CategoryLists,
    ledger: Ledger = Depends(get_ledger)
):
    """Replace the category lists; budgets are kept."""
    try:
        ledger.replace_categories(
            income_categories=lists.income_categories,
            expense_categories=lists.expense_categories,
            investment_categories=lists.investment_categories,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return build_category_response(ledger)


@router.put("/budgets/{category}", response_model=BudgetValue)
def update_budget(
    category: str,
    update: BudgetUpdate,
    ledger: Ledger = Depends(get_ledger)
):
    """Set the monthly budget target for a category."""
    amount = ledger.set_budget(category, update.amount)
    return BudgetValue(category=category, amount=float(amount))
