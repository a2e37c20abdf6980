"""Service aggregating transactions into chart series."""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from flowledger.models.category import CategoryTotals
from flowledger.models.period import Period
from flowledger.models.transaction import Transaction, TransactionType
from flowledger.schemas.statistics import (
    BalancePoint,
    CalendarDay,
    CalendarMonth,
    FlowEntry,
    NetAssetSeries,
    SpendingBucket,
    SpendingSeries,
)
from flowledger.services.period_service import (
    ResolvedPeriod,
    bucket_key,
    each_month,
    resolve_period,
    start_of_month,
)
from flowledger.services.transaction_service import sort_by_date


def spending_series(
    transactions: Sequence[Transaction],
    resolved: ResolvedPeriod,
    type_filter: TransactionType = TransactionType.expense,
    category_colors: Optional[Dict[str, str]] = None
) -> SpendingSeries:
    """
    Sum ``abs(amount)`` per bucket and per category over a resolved period.

    Every bucket of the axis is present even when empty. Transactions whose
    bucket is not on the axis are ignored.
    """
    per_category: Dict[date, CategoryTotals] = {b.key: CategoryTotals() for b in resolved.buckets}
    totals: Dict[date, Decimal] = {b.key: Decimal("0") for b in resolved.buckets}

    for t in transactions:
        if t.type != type_filter or not resolved.contains(t.date):
            continue
        key = bucket_key(resolved.period, t.date)
        if key not in totals:
            continue
        amount = abs(t.amount)
        per_category[key].add(t.category, amount)
        totals[key] += amount

    buckets = [
        SpendingBucket(
            key=b.key,
            label=b.label,
            per_category={cat: float(amount) for cat, amount in per_category[b.key].items()},
            total=float(totals[b.key]),
        )
        for b in resolved.buckets
    ]

    return SpendingSeries(
        period=resolved.period,
        offset=resolved.offset,
        start=resolved.start,
        end=resolved.end,
        title=resolved.title,
        buckets=buckets,
        category_colors=category_colors or {},
    )


def calendar_month(
    transactions: Sequence[Transaction],
    today: date,
    offset: int = 0,
    first_weekday: int = 0
) -> CalendarMonth:
    """Daily expense totals for the month view, laid out for a 7-column grid."""
    resolved = resolve_period(Period.month, offset, today)

    daily: Dict[date, Decimal] = defaultdict(Decimal)
    for t in transactions:
        if t.type == TransactionType.expense and resolved.contains(t.date):
            daily[t.date] += abs(t.amount)

    days = []
    current = resolved.start
    while current <= resolved.end:
        days.append(CalendarDay(
            day=current.day,
            date=current,
            total=float(daily.get(current, Decimal("0"))),
            is_today=current == today,
        ))
        current += timedelta(days=1)

    return CalendarMonth(
        title=resolved.title,
        start=resolved.start,
        end=resolved.end,
        leading_blanks=(resolved.start.weekday() - first_weekday) % 7,
        days=days,
    )


def net_asset_series(transactions: Sequence[Transaction]) -> NetAssetSeries:
    """
    Running wealth and investment balances, one point per transaction.

    Wealth adds the signed amount of income and expense entries; the
    investment balance adds ``abs(amount)`` of investment entries. Both
    series get a point for every transaction so their x-axes line up.
    """
    wealth_balance = Decimal("0")
    investment_balance = Decimal("0")
    wealth = []
    investment = []

    for t in sort_by_date(transactions):
        if t.type in (TransactionType.income, TransactionType.expense):
            wealth_balance += t.amount
        elif t.type == TransactionType.investment:
            investment_balance += abs(t.amount)
        wealth.append(BalancePoint(date=t.date, balance=float(wealth_balance)))
        investment.append(BalancePoint(date=t.date, balance=float(investment_balance)))

    return NetAssetSeries(wealth=wealth, investment=investment)


def flow_series(transactions: Sequence[Transaction], today: date) -> List[FlowEntry]:
    """Per-month income, expense and investment totals for the year of ``today``."""
    months = each_month(date(today.year, 1, 1), date(today.year, 12, 31))
    income: Dict[date, Decimal] = {m: Decimal("0") for m in months}
    expense: Dict[date, Decimal] = {m: Decimal("0") for m in months}
    investment: Dict[date, Decimal] = {m: Decimal("0") for m in months}

    for t in transactions:
        if t.date.year != today.year:
            continue
        month = start_of_month(t.date)
        if t.type == TransactionType.income:
            income[month] += t.amount
        elif t.type == TransactionType.expense:
            expense[month] += abs(t.amount)
        elif t.type == TransactionType.investment:
            investment[month] += abs(t.amount)

    return [
        FlowEntry(
            month=m,
            label=m.strftime("%b"),
            income=float(income[m]),
            expense=float(expense[m]),
            investment=float(investment[m]),
        )
        for m in months
    ]
