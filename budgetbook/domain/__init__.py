"""Domain models and types for budgetbook.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from budgetbook.domain.categories import Category, category_of, code_of
from budgetbook.domain.errors import (
    FileUnavailable,
    InsufficientFunds,
    LedgerError,
    MalformedEntry,
    ParseError,
    UnknownCategory,
)
from budgetbook.domain.ledger import Ledger
from budgetbook.domain.models import Label, Money
from budgetbook.domain.purchases import Purchase

__all__ = [
    "Category",
    "FileUnavailable",
    "InsufficientFunds",
    "Label",
    "Ledger",
    "LedgerError",
    "MalformedEntry",
    "Money",
    "ParseError",
    "Purchase",
    "UnknownCategory",
    "category_of",
    "code_of",
]
