"""Text encoding of a ledger for the purchases file.

Format, one record per line:

    Balance:90.01
    FOOD:Lunch $9.99

A line is split on its first ":". Neither ":" nor "$" is escaped, so names
containing them do not survive a round trip.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from budgetbook.domain.categories import category_named
from budgetbook.domain.errors import MalformedEntry, ParseError, UnknownCategory
from budgetbook.domain.models import Money
from budgetbook.domain.money import format_money, round2
from budgetbook.domain.purchases import Purchase, create_purchase

BALANCE_KEY = "Balance"


@dataclass(frozen=True)
class BalanceRecord:
    """Balance line: an amount to add to the ledger balance."""

    amount: Money


def encode_balance(balance: Money) -> str:
    return f"{BALANCE_KEY}:{format_money(balance)}"


def encode_purchase(purchase: Purchase) -> str:
    return f"{purchase.category.name}:{purchase.label}"


def encode_ledger(balance: Money, purchases: Iterable[Purchase]) -> str:
    """Encode a balance and its purchases as file text.

    Args:
        balance: Balance in cents.
        purchases: Purchases in recording order.

    Returns:
        Newline-terminated text, balance line first.
    """
    lines = [encode_balance(balance)]
    lines.extend(encode_purchase(purchase) for purchase in purchases)
    return "\n".join(lines) + "\n"


def decode_line(line: str, line_number: int) -> BalanceRecord | Purchase:
    """Decode a single line of the purchases file.

    Args:
        line: Line text without its line terminator.
        line_number: 1-based position, used in error messages.

    Returns:
        BalanceRecord for a balance line (key matched case-insensitively),
        otherwise the Purchase described by the line.

    Raises:
        ParseError: If the line has no ":", names an unknown category,
            or carries an unparseable amount or label.
    """
    key, separator, value = line.partition(":")
    if not separator:
        raise ParseError(line_number, line, "expected '<key>:<value>'")

    if key.strip().lower() == BALANCE_KEY.lower():
        try:
            return BalanceRecord(amount=round2(value))
        except ValueError:
            raise ParseError(line_number, line, f"invalid balance {value.strip()!r}") from None

    try:
        category = category_named(key)
    except UnknownCategory:
        raise ParseError(line_number, line, f"unknown category {key.strip()!r}") from None

    try:
        return create_purchase(category, value)
    except MalformedEntry as e:
        raise ParseError(line_number, line, e.reason) from None
