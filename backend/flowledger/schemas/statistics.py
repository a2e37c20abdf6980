"""
Statistics schemas.
"""

import datetime
from pydantic import BaseModel, Field
from typing import Dict, List

from flowledger.models.period import Period


class SpendingBucket(BaseModel):
    key: datetime.date
    label: str
    per_category: Dict[str, float] = Field(default_factory=dict)
    total: float = 0.0


class SpendingSeries(BaseModel):
    period: Period
    offset: int
    start: datetime.date
    end: datetime.date
    title: str
    buckets: List[SpendingBucket]
    category_colors: Dict[str, str] = Field(default_factory=dict)


class CalendarDay(BaseModel):
    day: int
    date: datetime.date
    total: float
    is_today: bool


class CalendarMonth(BaseModel):
    title: str
    start: datetime.date
    end: datetime.date
    leading_blanks: int
    days: List[CalendarDay]


class BalancePoint(BaseModel):
    date: datetime.date
    balance: float


class NetAssetSeries(BaseModel):
    wealth: List[BalancePoint]
    investment: List[BalancePoint]


class FlowEntry(BaseModel):
    month: datetime.date
    label: str
    income: float = 0.0
    expense: float = 0.0
    investment: float = 0.0
