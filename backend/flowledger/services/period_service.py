"""Service resolving reporting periods into calendar intervals and bucket axes."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List

from dateutil.relativedelta import relativedelta

from flowledger.models.period import Period


@dataclass(frozen=True)
class Bucket:
    """One point on a chart's time axis.

    ``key`` is the first date the bucket covers, so months with the same
    name in different years never share a bucket. ``label`` is display only.
    """
    key: date
    label: str


@dataclass(frozen=True)
class ResolvedPeriod:
    period: Period
    offset: int
    start: date
    end: date
    title: str
    buckets: List[Bucket] = field(default_factory=list)

    @property
    def bucket_labels(self) -> List[str]:
        return [b.label for b in self.buckets]

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def start_of_week(day: date, first_weekday: int = 6) -> date:
    """First day of the week containing ``day`` (weekday numbering as in ``date.weekday``)."""
    return day - timedelta(days=(day.weekday() - first_weekday) % 7)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    return start_of_month(day) + relativedelta(months=1) - timedelta(days=1)


def each_month(start: date, end: date) -> List[date]:
    months = []
    current = start_of_month(start)
    while current <= end:
        months.append(current)
        current += relativedelta(months=1)
    return months


def bucket_key(period: Period, day: date) -> date:
    """Map a date onto the bucket it belongs to for ``period``."""
    if period in (Period.six_month, Period.year):
        return start_of_month(day)
    return day


def bucket_label(period: Period, key: date) -> str:
    if period == Period.week:
        return key.strftime("%a")
    elif period == Period.month:
        return str(key.day)
    else:
        return key.strftime("%b")


def _short_day(day: date) -> str:
    return f"{day.day} {day.strftime('%b')}"


def resolve_period(
    period: Period,
    offset: int,
    today: date,
    first_weekday: int = 6
) -> ResolvedPeriod:
    """
    Compute the interval and bucket axis for ``period`` shifted by ``offset``.

    Offset 0 is the period containing ``today``; negative offsets go back.
    The Month period has no bucket axis because it is shown as a calendar.
    """
    if period == Period.week:
        anchor = today + timedelta(weeks=offset)
        start = start_of_week(anchor, first_weekday)
        end = start + timedelta(days=6)
        days = [start + timedelta(days=i) for i in range(7)]
        return ResolvedPeriod(
            period=period,
            offset=offset,
            start=start,
            end=end,
            title=f"{_short_day(start)} - {_short_day(end)}",
            buckets=[Bucket(key=d, label=bucket_label(period, d)) for d in days],
        )

    elif period == Period.month:
        anchor = today + relativedelta(months=offset)
        start = start_of_month(anchor)
        return ResolvedPeriod(
            period=period,
            offset=offset,
            start=start,
            end=end_of_month(anchor),
            title=start.strftime("%B %Y"),
        )

    elif period == Period.six_month:
        anchor = today + relativedelta(months=6 * offset)
        start = start_of_month(anchor - relativedelta(months=5))
        end = end_of_month(anchor)
        return ResolvedPeriod(
            period=period,
            offset=offset,
            start=start,
            end=end,
            title=f"{start.strftime('%b %Y')} - {end.strftime('%b %Y')}",
            buckets=[Bucket(key=m, label=bucket_label(period, m)) for m in each_month(start, end)],
        )

    elif period == Period.year:
        anchor = today + relativedelta(years=offset)
        start = date(anchor.year, 1, 1)
        end = date(anchor.year, 12, 31)
        return ResolvedPeriod(
            period=period,
            offset=offset,
            start=start,
            end=end,
            title=str(anchor.year),
            buckets=[Bucket(key=m, label=bucket_label(period, m)) for m in each_month(start, end)],
        )

    raise ValueError(f"Unknown period: {period}")
