"""
Pydantic schemas package.
"""

from flowledger.schemas.ai import (
    ChatMessage,
    ChatCompletion,
    AskRequest,
    StatementRequest,
    InsightsResponse,
    StatementResponse,
    ProcessingStatus,
    FoundList,
)
from flowledger.schemas.budget import (
    BudgetRow,
    BudgetComparison,
    BudgetSection,
    BudgetOverview,
    BudgetUpdate,
)
from flowledger.schemas.category import (
    CategoryLists,
    CategoryResponse,
    BudgetValue,
)
from flowledger.schemas.statistics import (
    SpendingBucket,
    SpendingSeries,
    CalendarDay,
    CalendarMonth,
    BalancePoint,
    NetAssetSeries,
    FlowEntry,
)
from flowledger.schemas.transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
    TransactionImportRequest,
    TransactionImportResponse,
)

__all__ = [
    "ChatMessage",
    "ChatCompletion",
    "AskRequest",
    "StatementRequest",
    "InsightsResponse",
    "StatementResponse",
    "ProcessingStatus",
    "FoundList",
    "BudgetRow",
    "BudgetComparison",
    "BudgetSection",
    "BudgetOverview",
    "BudgetUpdate",
    "CategoryLists",
    "CategoryResponse",
    "BudgetValue",
    "SpendingBucket",
    "SpendingSeries",
    "CalendarDay",
    "CalendarMonth",
    "BalancePoint",
    "NetAssetSeries",
    "FlowEntry",
    "TransactionBase",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionListResponse",
    "TransactionImportRequest",
    "TransactionImportResponse",
]
