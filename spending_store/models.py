from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    icon: str
    icon_bg: str


@dataclass(frozen=True)
class CategoryIcon:
    src: str
    alt: str


@dataclass(frozen=True)
class TransactionInput:
    category: int
    amount: str | float | int
    date: str
    description: str | None = None
    merchant: str | None = None


@dataclass(frozen=True)
class StoredTransaction:
    """A transaction as held by the store.

    ``amount`` is in chart units (input amount times ``SCALE_FACTOR``) and
    ``category`` is the resolved category name.
    """

    date: str
    category: str
    amount: float
    description: str | None = None
    merchant: str | None = None


@dataclass(frozen=True)
class DisplayTransaction:
    date: str
    category: str
    description: str
    amount: float
    merchant: str


class AddFailure(str, Enum):
    INVALID_CATEGORY = "invalid_category"


@dataclass(frozen=True)
class AddResult:
    transaction: StoredTransaction | None = None
    failure: AddFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
