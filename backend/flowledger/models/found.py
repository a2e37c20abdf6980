"""
AI-extracted transaction candidates.
"""

import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from flowledger.models.transaction import AMOUNT_LIMIT, TransactionType


class FoundTransaction(BaseModel):
    """A transaction proposed by statement parsing, awaiting acceptance.

    Every field except ``id`` may be missing because the AI response is
    validated field by field rather than trusted.
    """

    id: str
    date: Optional[datetime.date] = None
    amount: Optional[Decimal] = Field(None, allow_inf_nan=False, gt=-AMOUNT_LIMIT, lt=AMOUNT_LIMIT)
    category: Optional[str] = None
    note: Optional[str] = None
    type: Optional[TransactionType] = None
    source: str = "statement"

    def is_complete(self) -> bool:
        return bool(self.date and self.amount and self.category and self.type)
