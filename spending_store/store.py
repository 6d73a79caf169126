"""In-memory transaction store backing the spending UI.

Usage::

    from spending_store.store import create_store

    store = create_store()
    store.add_transaction(
        {
            "category": 3,
            "description": "Lunch",
            "amount": "15.75",
            "date": "2024-09-01",
            "merchant": "Restaurant",
        }
    )
    store.get_recent_transactions()

Each store owns its own transaction list; only the category catalog is shared.
"""

from collections.abc import Mapping
from dataclasses import asdict

from .catalog import get_category
from .logging_setup import get_logger
from .logic import (
    date_sort_key,
    format_date_for_display,
    parse_amount,
    validate_limit,
)
from .models import (
    AddFailure,
    AddResult,
    DisplayTransaction,
    StoredTransaction,
    TransactionInput,
)
from .settings import DEFAULT_RECENT_LIMIT


# Stored amounts are in the spending chart's units: input amount times 20.
SCALE_FACTOR = 20

logger = get_logger(__name__)


def _coerce_input(new_transaction) -> TransactionInput:
    if isinstance(new_transaction, TransactionInput):
        return new_transaction
    if isinstance(new_transaction, Mapping):
        return TransactionInput(
            category=new_transaction.get("category"),
            amount=new_transaction.get("amount"),
            date=new_transaction.get("date"),
            description=new_transaction.get("description"),
            merchant=new_transaction.get("merchant"),
        )
    raise TypeError("transaction must be a TransactionInput or a mapping")


class TransactionsStore:
    def __init__(self) -> None:
        self._transactions: list[StoredTransaction] = []

    def __len__(self) -> int:
        return len(self._transactions)

    def get_all_transactions(self) -> list[StoredTransaction]:
        return list(self._transactions)

    def add_transaction(self, new_transaction) -> AddResult:
        """Resolve the category, scale the amount and append the record.

        An unknown category id is reported through the returned ``AddResult``
        and leaves the store untouched.
        """
        txn = _coerce_input(new_transaction)
        category = get_category(txn.category)
        if category is None:
            logger.error("Invalid category ID: %r", txn.category)
            return AddResult(failure=AddFailure.INVALID_CATEGORY)

        logger.debug("Original transaction: %s", asdict(txn))
        stored = StoredTransaction(
            date=txn.date,
            category=category.name,
            amount=parse_amount(txn.amount) * SCALE_FACTOR,
            description=txn.description,
            merchant=txn.merchant,
        )
        logger.debug("Formatted transaction for store: %s", asdict(stored))

        self._transactions.append(stored)
        return AddResult(transaction=stored)

    def get_recent_transactions(
        self, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[DisplayTransaction]:
        validate_limit(limit)
        newest_first = sorted(
            self._transactions,
            key=lambda txn: date_sort_key(txn.date),
            reverse=True,
        )
        return [_to_display(txn) for txn in newest_first[:limit]]


def _to_display(txn: StoredTransaction) -> DisplayTransaction:
    return DisplayTransaction(
        date=format_date_for_display(txn.date),
        category=txn.category,
        description=txn.description or "Transaction",
        amount=txn.amount / SCALE_FACTOR,
        merchant=txn.merchant or txn.category,
    )


def create_store() -> TransactionsStore:
    return TransactionsStore()


_default_store: TransactionsStore | None = None


def get_store() -> TransactionsStore:
    """Return the process-wide store, building it on first use.

    It lives until the process exits. Tests and embedders that need isolation
    should call ``create_store()`` and pass that instance around instead.
    """
    global _default_store
    if _default_store is None:
        _default_store = create_store()
    return _default_store
