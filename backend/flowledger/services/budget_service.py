"""Service comparing category budgets against this month's tracked amounts."""

from datetime import date
from decimal import Decimal
from typing import Mapping, Sequence

from flowledger.models.category import CategorySettings, CategoryTotals
from flowledger.models.transaction import Transaction, TransactionType
from flowledger.schemas.budget import BudgetComparison, BudgetOverview, BudgetRow, BudgetSection

SECTION_TITLES = [
    (TransactionType.income, "Income"),
    (TransactionType.expense, "Expenses"),
    (TransactionType.investment, "Savings / Investments"),
]


def current_month_spend(transactions: Sequence[Transaction], today: date) -> CategoryTotals:
    """
    Sum signed amounts by category for the calendar month containing ``today``.

    This always covers the real current month and is independent of any
    period navigation in the statistics views.
    """
    spend = CategoryTotals()
    for t in transactions:
        if t.date.year == today.year and t.date.month == today.month:
            spend.add(t.category, t.amount)
    return spend


def percent_used(tracked: Decimal, budget: Decimal) -> Decimal:
    if budget > 0:
        return abs(tracked) / budget * 100
    return Decimal("0")


def compare_budgets(
    categories: Sequence[str],
    budgets: Mapping[str, Decimal],
    monthly_spend: Mapping[str, Decimal]
) -> BudgetComparison:
    """
    Build budget rows and totals over exactly the given categories, in order.

    Tracked figures are reported as magnitudes; the total is the magnitude
    of the signed sum, so refunds offset spending within a list.
    """
    rows = []
    total_budget = Decimal("0")
    total_tracked = Decimal("0")

    for category in categories:
        budget = Decimal(str(budgets.get(category, 0)))
        tracked = Decimal(str(monthly_spend.get(category, 0)))
        total_budget += budget
        total_tracked += tracked
        rows.append(BudgetRow(
            category=category,
            budget=float(budget),
            tracked=float(abs(tracked)),
            percent_used=float(percent_used(tracked, budget)),
            remaining=float(budget - abs(tracked)),
        ))

    return BudgetComparison(
        per_category=rows,
        total_budget=float(total_budget),
        total_tracked=float(abs(total_tracked)),
        total_remaining=float(total_budget - abs(total_tracked)),
        over_budget=abs(total_tracked) > total_budget,
    )


def budget_overview(
    category_settings: CategorySettings,
    transactions: Sequence[Transaction],
    today: date
) -> BudgetOverview:
    """The Budget view: one comparison per category list."""
    spend = current_month_spend(transactions, today)
    sections = [
        BudgetSection(
            title=title,
            type=transaction_type,
            comparison=compare_budgets(
                category_settings.categories_for(transaction_type),
                category_settings.budgets,
                spend,
            ),
        )
        for transaction_type, title in SECTION_TITLES
    ]
    return BudgetOverview(month=today.strftime("%Y-%m"), sections=sections)
