"""Purchase records and parsing of "<name> $<price>" entries.

This module contains the functional core for purchase text:
- No I/O operations
- No side effects
- The label is derived from the record, never stored separately

All monetary amounts are in cents (Money type).
"""

from dataclasses import dataclass

from budgetbook.domain.categories import Category
from budgetbook.domain.errors import MalformedEntry
from budgetbook.domain.models import Label, Money
from budgetbook.domain.money import format_money, round2


@dataclass(frozen=True)
class Purchase:
    """Immutable purchase record."""

    name: str
    price: Money
    category: Category

    @property
    def label(self) -> Label:
        """Encoded form used as the storage key and for display."""
        return make_label(self.name, self.price)


def make_label(name: str, price: Money) -> Label:
    """Build the "<name> $<price>" label for a purchase.

    Args:
        name: Free-text purchase name.
        price: Price in cents.

    Returns:
        Label with the price formatted to two decimals.
    """
    return Label(f"{name} ${format_money(price)}")


def parse_entry(entry: str) -> tuple[str, Money]:
    """Split purchase text into its name and rounded price.

    The price follows the last "$"; whitespace between the name and the "$"
    is dropped.

    Args:
        entry: Raw purchase text such as "Lunch $9.994".

    Returns:
        Tuple of (name, price_in_cents).

    Raises:
        MalformedEntry: If there is no "$" or the price is not a non-negative number.
    """
    name, separator, price_text = entry.rpartition("$")
    if not separator:
        raise MalformedEntry(entry, "missing '$' before the price")

    try:
        price = round2(price_text)
    except ValueError:
        raise MalformedEntry(entry, f"invalid price {price_text.strip()!r}") from None

    if price < 0:
        raise MalformedEntry(entry, "price cannot be negative")

    return name.rstrip(), price


def create_purchase(category: Category, entry: str) -> Purchase:
    """Parse purchase text into a record for the given category."""
    name, price = parse_entry(entry)
    return Purchase(name=name, price=price, category=category)
