"""Service for AI-assisted analysis, questions and statement parsing."""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence

from pydantic import ValidationError

from flowledger.ai.client import AIClient, AIClientError
from flowledger.ai.prompts import (
    ANALYSIS_SYSTEM, ANALYSIS_USER,
    QUESTION_SYSTEM, QUESTION_USER,
    STATEMENT_PARSING_SYSTEM, STATEMENT_PARSING_USER
)
from flowledger.models.category import CategorySettings
from flowledger.models.found import FoundTransaction
from flowledger.models.transaction import Transaction

logger = logging.getLogger(__name__)

EXTRACTED_FIELDS = ("date", "amount", "category", "note", "type")


class AIToolError(Exception):
    """An AI tool failed; ``notification`` is the text shown to the user."""

    def __init__(self, notification: str, status_code: int = 502):
        super().__init__(notification)
        self.notification = notification
        self.status_code = status_code


class ProcessingFlag:
    """Single in-flight marker for AI work; always cleared when the work ends."""

    def __init__(self):
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @contextmanager
    def hold(self) -> Iterator[None]:
        if self._active:
            raise AIToolError("An AI request is already in progress", status_code=409)
        self._active = True
        try:
            yield
        finally:
            self._active = False


def format_transactions(transactions: Sequence[Transaction], limit: int) -> str:
    """One line per transaction, most recent first, at most ``limit`` lines."""
    recent = sorted(transactions, key=lambda t: t.date, reverse=True)[:limit]
    lines = []
    for t in recent:
        line = f"{t.date.isoformat()}: {t.category} - ${t.amount}"
        if t.note:
            line += f" ({t.note})"
        lines.append(line)
    return "\n".join(lines)


async def analyze_transactions(
    client: AIClient,
    transactions: Sequence[Transaction],
    categories: CategorySettings,
    limit: int = 50
) -> str:
    if not transactions:
        raise AIToolError("No transactions to analyze", status_code=400)

    user_prompt = ANALYSIS_USER.format(
        transactions_text=format_transactions(transactions, limit),
        income_categories=", ".join(categories.income_categories),
        expense_categories=", ".join(categories.expense_categories),
        investment_categories=", ".join(categories.investment_categories),
    )

    try:
        return await client.complete(system_prompt=ANALYSIS_SYSTEM, user_prompt=user_prompt)
    except AIClientError as e:
        logger.error(f"AI analysis failed: {e}")
        raise AIToolError("AI analysis failed") from e


async def ask_question(client: AIClient, question: str, transaction_count: int) -> str:
    if not question.strip():
        raise AIToolError("Please enter a question", status_code=400)

    user_prompt = QUESTION_USER.format(
        transaction_count=transaction_count,
        question=question.strip()
    )

    try:
        return await client.complete(system_prompt=QUESTION_SYSTEM, user_prompt=user_prompt)
    except AIClientError as e:
        logger.error(f"AI query failed: {e}")
        raise AIToolError("Failed to get answer") from e


def _validate_field(name: str, value: Any) -> Optional[Any]:
    if value is None or value == "":
        return None
    try:
        found = FoundTransaction.model_validate({"id": "", name: value})
    except ValidationError:
        logger.warning(f"Discarding invalid '{name}' in extracted transaction: {value!r}")
        return None
    return getattr(found, name)


def extract_found_transactions(payload: Any) -> List[FoundTransaction]:
    """
    Turn a parsed ``{"transactions": [...]}`` response into found items.

    Each field is validated on its own; an invalid field becomes None and
    items that are not objects are dropped.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("transactions"), list):
        raise AIToolError("Failed to parse statement")

    items = []
    for index, raw in enumerate(payload["transactions"]):
        if not isinstance(raw, dict):
            logger.warning(f"Skipping extracted item {index}: not an object")
            continue
        fields = {name: _validate_field(name, raw.get(name)) for name in EXTRACTED_FIELDS}
        items.append(FoundTransaction(id=f"ai-{uuid.uuid4()}", **fields))
    return items


async def parse_statement(
    client: AIClient,
    statement_text: str,
    categories: CategorySettings,
    context: str = "bank statement"
) -> List[FoundTransaction]:
    if not statement_text.strip():
        raise AIToolError("Please paste statement text", status_code=400)

    user_prompt = STATEMENT_PARSING_USER.format(
        context=context,
        statement_text=statement_text,
        income_categories=", ".join(categories.income_categories),
        expense_categories=", ".join(categories.expense_categories),
        investment_categories=", ".join(categories.investment_categories),
    )

    try:
        payload = await client.complete_json(
            system_prompt=STATEMENT_PARSING_SYSTEM,
            user_prompt=user_prompt
        )
    except AIClientError as e:
        logger.error(f"Statement parsing failed: {e}")
        raise AIToolError("Failed to parse statement") from e

    return extract_found_transactions(payload)
