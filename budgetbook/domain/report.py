"""Pure functions for purchase reports and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

Sorting is stable: purchases with equal prices keep the order in which they
were first recorded.

All monetary amounts are in cents (Money type).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from budgetbook.domain.categories import Category
from budgetbook.domain.models import Label, Money
from budgetbook.domain.purchases import Purchase

TOTAL_KEY = "TOTAL"


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable spending total for a single category."""

    category: Category
    amount: Money


@dataclass(frozen=True)
class CategoryTotals:
    """Immutable per-category totals, largest first, and their sum."""

    categories: list[CategoryTotal]
    total: Money

    def as_dict(self) -> dict[str, Money]:
        """Category-name keyed totals in ranked order, followed by "TOTAL"."""
        totals: dict[str, Money] = {entry.category.name: entry.amount for entry in self.categories}
        totals[TOTAL_KEY] = self.total
        return totals


@dataclass(frozen=True)
class PurchaseListing:
    """Immutable list of purchase labels with their summed price."""

    labels: list[Label]
    total: Money


def sum_prices(purchases: Iterable[Purchase]) -> Money:
    """Sum purchase prices in cents."""
    return Money(sum(purchase.price for purchase in purchases))


def sort_by_price(purchases: Iterable[Purchase]) -> list[Purchase]:
    """Sort purchases by price, most expensive first.

    Args:
        purchases: Purchases in recording order.

    Returns:
        New list sorted by descending price; ties keep recording order.
    """
    return sorted(purchases, key=lambda purchase: purchase.price, reverse=True)


def all_labels_by_price(purchases: Iterable[Purchase]) -> list[Label]:
    """Labels of every purchase, most expensive first."""
    return [purchase.label for purchase in sort_by_price(purchases)]


def labels_for_category(purchases: Iterable[Purchase], category: Category) -> list[Label] | None:
    """Labels of one category's purchases, most expensive first.

    Args:
        purchases: Purchases in recording order.
        category: Category to report on.

    Returns:
        Sorted labels, or None if nothing was recorded in the category.
    """
    matching = [purchase for purchase in purchases if purchase.category is category]
    if not matching:
        return None
    return all_labels_by_price(matching)


def calculate_category_totals(purchases: Iterable[Purchase]) -> CategoryTotals:
    """Total spending for each category, including those with no purchases.

    Args:
        purchases: Purchases in recording order.

    Returns:
        CategoryTotals ranked by descending amount (ties by category code),
        with the overall total kept separately.
    """
    totals: dict[Category, int] = {category: 0 for category in Category}
    for purchase in purchases:
        totals[purchase.category] += purchase.price

    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0].code))

    return CategoryTotals(
        categories=[CategoryTotal(category=category, amount=Money(amount)) for category, amount in ranked],
        total=Money(sum(totals.values())),
    )


def create_listing(purchases: Iterable[Purchase], category: Category | None = None) -> PurchaseListing | None:
    """List purchases in recording order, optionally for one category.

    Args:
        purchases: Purchases in recording order.
        category: Category filter, or None for all purchases.

    Returns:
        PurchaseListing, or None if there is nothing to list.
    """
    selected = [purchase for purchase in purchases if category is None or purchase.category is category]
    if not selected:
        return None

    return PurchaseListing(
        labels=[purchase.label for purchase in selected],
        total=sum_prices(selected),
    )
