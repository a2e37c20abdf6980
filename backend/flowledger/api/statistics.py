"""
Statistics API endpoints.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from flowledger.config import settings
from flowledger.dependencies import get_ledger, get_today
from flowledger.ledger import Ledger
from flowledger.models.period import Period
from flowledger.models.transaction import TransactionType
from flowledger.schemas.statistics import CalendarMonth, FlowEntry, NetAssetSeries, SpendingSeries
from flowledger.services.color_service import base_color_for, category_colors
from flowledger.services.period_service import resolve_period
from flowledger.services.statistics_service import (
    calendar_month,
    flow_series,
    net_asset_series,
    spending_series,
)

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("/spending", response_model=SpendingSeries)
def get_spending(
    period: Period = Query(Period.month),
    offset: int = Query(0),
    type: TransactionType = Query(TransactionType.expense),
    ledger: Ledger = Depends(get_ledger),
    today: date = Depends(get_today)
):
    """
    Per-bucket, per-category spending for a navigable period.
    The Month period returns no buckets; use /statistics/calendar.
    """
    resolved = resolve_period(period, offset, today, settings.first_weekday)
    colors = category_colors(
        ledger.categories.categories_for(type),
        base_color_for(type, settings)
    )
    return spending_series(ledger.list_transactions(), resolved, type, colors)


@router.get("/calendar", response_model=CalendarMonth)
def get_calendar(
    offset: int = Query(0),
    ledger: Ledger = Depends(get_ledger),
    today: date = Depends(get_today)
):
    """Daily expense totals for one month."""
    return calendar_month(
        ledger.list_transactions(),
        today,
        offset,
        settings.calendar_first_weekday
    )


@router.get("/net-assets", response_model=NetAssetSeries)
def get_net_assets(ledger: Ledger = Depends(get_ledger)):
    """Running wealth and investment balances."""
    return net_asset_series(ledger.list_transactions())


@router.get("/flow", response_model=List[FlowEntry])
def get_flow(
    ledger: Ledger = Depends(get_ledger),
    today: date = Depends(get_today)
):
    """Monthly income, expense and investment totals for the current year."""
    return flow_series(ledger.list_transactions(), today)
