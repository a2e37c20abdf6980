"""
FastAPI dependencies.
"""

from datetime import date
from typing import Optional

from flowledger.ledger import Ledger
from flowledger.services.ai_service import ProcessingFlag

_ledger: Optional[Ledger] = None
_processing = ProcessingFlag()


def get_ledger() -> Ledger:
    """
    Dependency for the shared in-memory ledger.
    """
    global _ledger
    if _ledger is None:
        _ledger = Ledger.from_settings()
    return _ledger


def get_processing_flag() -> ProcessingFlag:
    return _processing


def get_today() -> date:
    """Current date; overridden in tests."""
    return date.today()
