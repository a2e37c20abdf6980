"""
Domain models package.
"""

from flowledger.models.transaction import Transaction, TransactionType
from flowledger.models.category import CategorySettings, CategoryTotals
from flowledger.models.period import Period
from flowledger.models.found import FoundTransaction

__all__ = [
    "Transaction",
    "TransactionType",
    "CategorySettings",
    "CategoryTotals",
    "Period",
    "FoundTransaction",
]
