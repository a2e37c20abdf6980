"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from datetime import date

from flowledger.dependencies import get_ledger
from flowledger.ledger import Ledger
from flowledger.models.transaction import TransactionType
from flowledger.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
    TransactionListResponse,
    TransactionImportRequest,
    TransactionImportResponse,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    type: Optional[TransactionType] = None,
    category: Optional[str] = None,
    ledger: Ledger = Depends(get_ledger)
):
    """List transactions, newest first"""
    transactions = ledger.list_transactions(
        start_date=start_date,
        end_date=end_date,
        transaction_type=type,
        category=category,
    )
    transactions = sorted(transactions, key=lambda t: t.date, reverse=True)

    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in transactions],
        total=len(transactions)
    )


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    ledger: Ledger = Depends(get_ledger)
):
    """Add a transaction"""
    try:
        created = ledger.add_transaction(**transaction.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return TransactionResponse.model_validate(created)


@router.post("/import", response_model=TransactionImportResponse)
def import_transactions(
    request: TransactionImportRequest,
    ledger: Ledger = Depends(get_ledger)
):
    """Bulk import raw records; malformed ones are skipped"""
    imported, skipped = ledger.import_records(request.records)
    return TransactionImportResponse(imported=len(imported), skipped=skipped)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    ledger: Ledger = Depends(get_ledger)
):
    """Get a single transaction"""
    transaction = ledger.get_transaction(transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    update: TransactionUpdate,
    ledger: Ledger = Depends(get_ledger)
):
    """Edit a transaction"""
    try:
        transaction = ledger.update_transaction(transaction_id, update.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    ledger: Ledger = Depends(get_ledger)
):
    """Delete a transaction"""
    if not ledger.delete_transaction(transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
