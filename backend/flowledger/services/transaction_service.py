"""Service for validating and ordering raw transaction records."""

import logging
import uuid
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

from pydantic import ValidationError

from flowledger.models.transaction import Transaction

logger = logging.getLogger(__name__)


def new_transaction_id() -> str:
    return str(uuid.uuid4())


def parse_transaction_records(
    records: Iterable[Mapping[str, Any]]
) -> Tuple[List[Transaction], int]:
    """
    Validate raw records one at a time.

    Records with an unparseable date, a non-numeric or non-finite amount,
    or an unknown type are skipped rather than aborting the batch.
    Returns the valid transactions and the number of skipped records.
    """
    transactions = []
    skipped = 0

    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.warning(f"Skipping record {index}: not an object")
            skipped += 1
            continue

        data = dict(record)
        if not data.get("id"):
            data["id"] = new_transaction_id()

        try:
            transactions.append(Transaction.model_validate(data))
        except ValidationError as e:
            logger.warning(f"Skipping record {index}: {e.error_count()} invalid field(s)")
            skipped += 1

    return transactions, skipped


def sort_by_date(transactions: Sequence[Transaction]) -> List[Transaction]:
    """Chronological order; same-day entries keep their insertion order."""
    return sorted(transactions, key=lambda t: t.date)
