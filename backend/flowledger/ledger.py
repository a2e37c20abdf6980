"""
In-memory ledger holding transactions, category settings and AI findings.
"""

from collections import OrderedDict
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from flowledger.config import Settings, settings as app_settings
from flowledger.models.category import CategorySettings
from flowledger.models.found import FoundTransaction
from flowledger.models.transaction import Transaction, TransactionType
from flowledger.services.transaction_service import new_transaction_id, parse_transaction_records


class Ledger:
    """Ordered transaction collection plus the user's category configuration."""

    def __init__(self, categories: Optional[CategorySettings] = None):
        self.categories = categories or CategorySettings()
        self._transactions: "OrderedDict[str, Transaction]" = OrderedDict()
        self._found: "OrderedDict[str, FoundTransaction]" = OrderedDict()

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Ledger":
        config = config or app_settings
        return cls(CategorySettings(
            income_categories=list(config.income_categories),
            expense_categories=list(config.expense_categories),
            investment_categories=list(config.investment_categories),
        ))

    # Transactions

    def add_transaction(self, **fields: Any) -> Transaction:
        if not fields.get("id"):
            fields["id"] = new_transaction_id()
        if fields["id"] in self._transactions:
            raise ValueError(f"Transaction {fields['id']} already exists")

        transaction = Transaction.model_validate(fields)
        self._transactions[transaction.id] = transaction
        return transaction

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def update_transaction(self, transaction_id: str, changes: Mapping[str, Any]) -> Optional[Transaction]:
        transaction = self._transactions.get(transaction_id)
        if transaction is None:
            return None

        data = transaction.model_dump()
        data.update(changes)
        data["id"] = transaction_id
        updated = Transaction.model_validate(data)
        self._transactions[transaction_id] = updated
        return updated

    def delete_transaction(self, transaction_id: str) -> bool:
        return self._transactions.pop(transaction_id, None) is not None

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_type: Optional[TransactionType] = None,
        category: Optional[str] = None,
    ) -> List[Transaction]:
        transactions = list(self._transactions.values())

        if start_date:
            transactions = [t for t in transactions if t.date >= start_date]
        if end_date:
            transactions = [t for t in transactions if t.date <= end_date]
        if transaction_type:
            transactions = [t for t in transactions if t.type == transaction_type]
        if category:
            transactions = [t for t in transactions if t.category == category]

        return transactions

    def import_records(self, records: Iterable[Mapping[str, Any]]) -> Tuple[List[Transaction], int]:
        transactions, skipped = parse_transaction_records(records)
        imported = []
        for transaction in transactions:
            if transaction.id in self._transactions:
                skipped += 1
                continue
            self._transactions[transaction.id] = transaction
            imported.append(transaction)
        return imported, skipped

    # Categories and budgets

    def set_budget(self, category: str, amount: Decimal) -> Decimal:
        if amount < 0:
            raise ValueError("Budget amount must be non-negative")
        self.categories.budgets[category] = amount
        return amount

    def replace_categories(
        self,
        income_categories: List[str],
        expense_categories: List[str],
        investment_categories: List[str],
    ) -> CategorySettings:
        lists = [income_categories, expense_categories, investment_categories]
        seen: Dict[str, int] = {}
        for names in lists:
            for name in names:
                seen[name] = seen.get(name, 0) + 1
        duplicates = sorted(name for name, count in seen.items() if count > 1)
        if duplicates:
            raise ValueError(f"Categories must be unique across lists: {', '.join(duplicates)}")

        self.categories = CategorySettings(
            income_categories=income_categories,
            expense_categories=expense_categories,
            investment_categories=investment_categories,
            budgets=self.categories.budgets,
        )
        return self.categories

    # AI findings

    def set_found(self, items: Iterable[FoundTransaction]) -> List[FoundTransaction]:
        self._found = OrderedDict((item.id, item) for item in items)
        return list(self._found.values())

    def list_found(self) -> List[FoundTransaction]:
        return list(self._found.values())

    def discard_found(self, found_id: str) -> bool:
        return self._found.pop(found_id, None) is not None

    def accept_found(self, found_id: str) -> Optional[Transaction]:
        """Move a complete found item into the transaction list."""
        item = self._found.get(found_id)
        if item is None:
            return None
        if not item.is_complete():
            raise ValueError("Extracted transaction is missing date, amount, category or type")

        transaction = self.add_transaction(
            date=item.date,
            amount=item.amount,
            category=item.category,
            type=item.type,
            note=item.note,
        )
        del self._found[found_id]
        return transaction
