"""The ledger: balance plus categorized purchases.

A Ledger is created empty and owned by whoever drives the session; there is
no module-level instance. Purchases are keyed by their label, so recording
the same name at the same rounded price twice keeps a single entry (the
balance is still debited both times). Later writes replace the stored record
but keep its original position in the recording order.
"""

import logging
from collections.abc import Iterable

from budgetbook.domain import codec, report
from budgetbook.domain.categories import Category, category_named, category_of
from budgetbook.domain.errors import InsufficientFunds, ParseError
from budgetbook.domain.models import Label, Money
from budgetbook.domain.money import format_money, round2
from budgetbook.domain.purchases import Purchase, create_purchase

logger = logging.getLogger(__name__)


class Ledger:
    """Balance and purchases for one budgeting session."""

    def __init__(self) -> None:
        self._balance = Money(0)
        self._purchases: dict[Label, Purchase] = {}

    def __repr__(self) -> str:
        return f"Ledger(balance={self.balance()}, purchases={len(self._purchases)})"

    @property
    def balance_amount(self) -> Money:
        """Balance in cents."""
        return self._balance

    @property
    def purchases(self) -> list[Purchase]:
        """Stored purchases in recording order."""
        return list(self._purchases.values())

    @property
    def is_empty(self) -> bool:
        return not self._purchases

    def balance(self) -> str:
        """Balance as a two-decimal string, e.g. "90.01"."""
        return format_money(self._balance)

    def add_income(self, amount: str | float | int) -> None:
        """Add income to the balance.

        Negative amounts are accepted and reduce the balance.

        Raises:
            ValueError: If the amount is not a finite number.
        """
        self._balance = Money(self._balance + round2(amount))

    def add_purchase(self, category: Category | str, entry: str) -> Purchase:
        """Record a purchase and debit its price from the balance.

        Args:
            category: Category or category name (case-insensitive).
            entry: Purchase text "<name> $<price>".

        Returns:
            The stored purchase, with its price rounded to cents.

        Raises:
            UnknownCategory: If the category name is not in the taxonomy.
            MalformedEntry: If the entry cannot be parsed.
            InsufficientFunds: If the rounded price exceeds the balance.
        """
        if not isinstance(category, Category):
            category = category_named(category)

        purchase = create_purchase(category, entry)

        if self._balance < purchase.price:
            logger.debug("Rejected %r: balance %s", purchase.label, self.balance())
            raise InsufficientFunds(purchase.price, self._balance)

        self._balance = Money(self._balance - purchase.price)
        self._store(purchase)
        logger.debug("Recorded %s:%s, balance %s", category.name, purchase.label, self.balance())
        return purchase

    def _store(self, purchase: Purchase) -> None:
        if purchase.label in self._purchases:
            logger.debug("Replacing stored purchase %r", purchase.label)
        self._purchases[purchase.label] = purchase

    def all_purchases_sorted_descending(self) -> list[Label]:
        """Labels of all purchases, most expensive first."""
        return report.all_labels_by_price(self._purchases.values())

    def totals_by_category(self) -> report.CategoryTotals:
        """Spending per category, largest first, with the overall total."""
        return report.calculate_category_totals(self._purchases.values())

    def purchases_for_category(self, code: int) -> list[Label] | None:
        """Labels of one category, most expensive first.

        Args:
            code: Category menu code (1-4).

        Returns:
            Sorted labels, or None if nothing was recorded in the category.

        Raises:
            UnknownCategory: If the code is not in the taxonomy.
        """
        return report.labels_for_category(self._purchases.values(), category_of(code))

    def listing(self, code: int | None = None) -> report.PurchaseListing | None:
        """Purchases in recording order with their total, for one category or all.

        Raises:
            UnknownCategory: If the code is not in the taxonomy.
        """
        category = category_of(code) if code is not None else None
        return report.create_listing(self._purchases.values(), category)

    def encode(self) -> str:
        """Encode balance and purchases as purchases-file text."""
        return codec.encode_ledger(self._balance, self._purchases.values())

    def load_lines(self, lines: Iterable[str], strict: bool = True) -> int:
        """Merge purchases-file lines into this ledger.

        Balance lines add to the balance. Purchase lines are merged by label,
        last write wins. Reading stops at the first blank line.

        Args:
            lines: File lines, with or without line terminators.
            strict: Raise on the first bad line if True, skip it with a
                warning otherwise.

        Returns:
            Number of records merged.

        Raises:
            ParseError: In strict mode, for the first bad line. Records
                merged before it are kept.
        """
        merged = 0
        for line_number, raw_line in enumerate(lines, 1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                break

            try:
                record = codec.decode_line(line, line_number)
            except ParseError as e:
                if strict:
                    raise
                logger.warning("Skipping %s", e)
                continue

            if isinstance(record, codec.BalanceRecord):
                self._balance = Money(self._balance + record.amount)
            else:
                self._store(record)
            merged += 1

        return merged
