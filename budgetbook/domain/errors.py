"""Errors raised by the ledger core.

All of them are recoverable at the call boundary. The command layer decides
whether a failure ends the process.
"""

from budgetbook.domain.models import Money
from budgetbook.domain.money import format_money


class LedgerError(Exception):
    """Base class for ledger errors."""


class MalformedEntry(LedgerError):
    """Purchase text is not of the form "<name> $<price>"."""

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"Malformed purchase {entry!r}: {reason}")
        self.entry = entry
        self.reason = reason


class InsufficientFunds(LedgerError):
    """Purchase price exceeds the current balance."""

    def __init__(self, price: Money, balance: Money) -> None:
        super().__init__(f"Price {format_money(price)} exceeds balance {format_money(balance)}")
        self.price = price
        self.balance = balance


class UnknownCategory(LedgerError, ValueError):
    """Category name or code is not part of the taxonomy."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown category: {value!r}")
        self.value = value


class FileUnavailable(LedgerError):
    """Ledger file is missing or cannot be read."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(LedgerError, ValueError):
    """A line of a ledger file cannot be decoded."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_number}: {reason} ({line!r})")
        self.line_number = line_number
        self.line = line
        self.reason = reason
