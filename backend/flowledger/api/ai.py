"""
AI tool API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from flowledger.ai.client import AIClient, get_ai_client
from flowledger.config import settings
from flowledger.dependencies import get_ledger, get_processing_flag
from flowledger.ledger import Ledger
from flowledger.schemas.ai import (
    AskRequest,
    FoundList,
    InsightsResponse,
    ProcessingStatus,
    StatementRequest,
    StatementResponse,
)
from flowledger.schemas.transaction import TransactionResponse
from flowledger.services import ai_service
from flowledger.services.ai_service import AIToolError, ProcessingFlag

router = APIRouter(prefix="/ai", tags=["ai"])


@router.get("/status", response_model=ProcessingStatus)
def get_status(processing: ProcessingFlag = Depends(get_processing_flag)):
    return ProcessingStatus(processing=processing.active)


@router.post("/analyze", response_model=InsightsResponse)
async def analyze_transactions(
    ledger: Ledger = Depends(get_ledger),
    client: AIClient = Depends(get_ai_client),
    processing: ProcessingFlag = Depends(get_processing_flag)
):
    """Freeform insights on recent transactions."""
    try:
        with processing.hold():
            insights = await ai_service.analyze_transactions(
                client,
                ledger.list_transactions(),
                ledger.categories,
                limit=settings.ai_analysis_limit
            )
    except AIToolError as e:
        raise HTTPException(status_code=e.status_code, detail=e.notification)
    return InsightsResponse(insights=insights, notification="Analysis complete")


@router.post("/ask", response_model=InsightsResponse)
async def ask_question(
    request: AskRequest,
    ledger: Ledger = Depends(get_ledger),
    client: AIClient = Depends(get_ai_client),
    processing: ProcessingFlag = Depends(get_processing_flag)
):
    """Ask the AI a question about the tracker."""
    try:
        with processing.hold():
            answer = await ai_service.ask_question(
                client,
                request.question,
                len(ledger.list_transactions())
            )
    except AIToolError as e:
        raise HTTPException(status_code=e.status_code, detail=e.notification)
    return InsightsResponse(insights=answer, notification="Answer received")


@router.post("/parse-statement", response_model=StatementResponse)
async def parse_statement(
    request: StatementRequest,
    ledger: Ledger = Depends(get_ledger),
    client: AIClient = Depends(get_ai_client),
    processing: ProcessingFlag = Depends(get_processing_flag)
):
    """Extract transactions from pasted statement text for review."""
    try:
        with processing.hold():
            items = await ai_service.parse_statement(
                client,
                request.statement_text,
                ledger.categories,
                context=request.context
            )
    except AIToolError as e:
        raise HTTPException(status_code=e.status_code, detail=e.notification)

    items = ledger.set_found(items)
    return StatementResponse(items=items, notification=f"Found {len(items)} transactions")


@router.get("/found", response_model=FoundList)
def list_found(ledger: Ledger = Depends(get_ledger)):
    items = ledger.list_found()
    return FoundList(items=items, total=len(items))


@router.post("/found/{found_id}/accept", response_model=TransactionResponse, status_code=201)
def accept_found(
    found_id: str,
    ledger: Ledger = Depends(get_ledger)
):
    """Add an extracted transaction to the tracker."""
    try:
        transaction = ledger.accept_found(found_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not transaction:
        raise HTTPException(status_code=404, detail="Extracted transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.delete("/found/{found_id}", status_code=204)
def discard_found(
    found_id: str,
    ledger: Ledger = Depends(get_ledger)
):
    if not ledger.discard_found(found_id):
        raise HTTPException(status_code=404, detail="Extracted transaction not found")
