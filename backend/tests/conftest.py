"""Shared test fixtures."""

import pytest
from types import SimpleNamespace
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal

import litellm

from flowledger.ai.client import AIClient, get_ai_client
from flowledger.config import Settings
from flowledger.dependencies import get_ledger, get_processing_flag, get_today
from flowledger.ledger import Ledger
from flowledger.main import app
from flowledger.models.category import CategorySettings
from flowledger.models.transaction import Transaction, TransactionType
from flowledger.services.ai_service import ProcessingFlag

# A Wednesday
TODAY = date(2024, 3, 20)


def make_transaction(id, day, amount, category, type, note=None):
    return Transaction(
        id=id,
        date=day,
        amount=Decimal(str(amount)),
        category=category,
        type=TransactionType(type),
        note=note,
    )


class FakeCompletion:
    """Stands in for litellm.acompletion and records every call."""

    def __init__(self):
        self.calls = []
        self.content = "OK"
        self.error = None

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None)


@pytest.fixture
def ai_config():
    return Settings(_env_file=None, ai_provider="openrouter", openrouter_api_key="test-key")


@pytest.fixture
def fake_completion(monkeypatch):
    fake = FakeCompletion()
    monkeypatch.setattr(litellm, "acompletion", fake)
    return fake


@pytest.fixture
def ai_client(ai_config, fake_completion):
    return AIClient(ai_config)


@pytest.fixture
def categories():
    return CategorySettings(
        income_categories=["Salary"],
        expense_categories=["Food", "Dining", "Transport"],
        investment_categories=["Stocks"],
        budgets={"Food": Decimal("200")},
    )


@pytest.fixture
def ledger(categories):
    """A fresh ledger for each test."""
    return Ledger(categories)


@pytest.fixture
def processing():
    return ProcessingFlag()


@pytest.fixture
def client(ledger, processing, ai_client):
    """Create a test client with ledger, clock and AI overrides."""
    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_processing_flag] = lambda: processing
    app.dependency_overrides[get_ai_client] = lambda: ai_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_transactions():
    """A small March 2024 ledger with one entry of each type."""
    return [
        make_transaction("t1", date(2024, 3, 1), -50, "Food", "expense"),
        make_transaction("t2", date(2024, 3, 15), 2000, "Salary", "income"),
        make_transaction("t3", date(2024, 3, 18), -20, "Dining", "expense", note="Lunch"),
        make_transaction("t4", date(2024, 3, 19), 300, "Stocks", "investment"),
    ]


@pytest.fixture
def populated_ledger(ledger, sample_transactions):
    for t in sample_transactions:
        ledger.add_transaction(**t.model_dump())
    return ledger
