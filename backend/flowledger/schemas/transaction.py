"""
Transaction schemas.
"""

import datetime
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from decimal import Decimal

from flowledger.models.transaction import AMOUNT_LIMIT, TransactionType


class TransactionBase(BaseModel):
    date: datetime.date
    amount: Decimal = Field(allow_inf_nan=False, gt=-AMOUNT_LIMIT, lt=AMOUNT_LIMIT)
    category: str = Field(..., min_length=1, max_length=100)
    type: TransactionType
    note: Optional[str] = None


class TransactionCreate(TransactionBase):
    id: Optional[str] = None


class TransactionUpdate(BaseModel):
    date: Optional[datetime.date] = None
    amount: Optional[Decimal] = Field(None, allow_inf_nan=False, gt=-AMOUNT_LIMIT, lt=AMOUNT_LIMIT)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[TransactionType] = None
    note: Optional[str] = None


class TransactionResponse(TransactionBase):
    id: str

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int


class TransactionImportRequest(BaseModel):
    records: List[Dict[str, Any]]


class TransactionImportResponse(BaseModel):
    imported: int
    skipped: int
