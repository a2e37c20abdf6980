"""
Budget overview API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends

from flowledger.dependencies import get_ledger, get_today
from flowledger.ledger import Ledger
from flowledger.schemas.budget import BudgetOverview
from flowledger.services.budget_service import budget_overview

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.get("", response_model=BudgetOverview)
def get_budget_overview(
    ledger: Ledger = Depends(get_ledger),
    today: date = Depends(get_today)
):
    """
    Budget vs tracked amounts for the current calendar month.
    Returns one section each for income, expenses and investments.
    """
    return budget_overview(ledger.categories, ledger.list_transactions(), today)
