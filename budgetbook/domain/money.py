"""Pure functions for rounding and formatting money.

Every amount that enters the ledger goes through round2, so the balance and
all prices are whole cents. Rounding is ROUND_HALF_UP applied to the decimal
text of the value, not to its binary float approximation.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from budgetbook.domain.models import Money

CENT = Decimal("0.01")
PLAIN_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def round2(value: str | float | int | Decimal) -> Money:
    """Round an amount to two decimal places and convert it to cents.

    Text must be plain decimal notation ("9.994", "-5", ".5"); exponents and
    digit separators such as "1e2" or "1_000" are rejected.

    Args:
        value: Amount in major units (e.g. "9.994", 9.994 or Decimal("9.994")).

    Returns:
        Amount in cents, rounded half-up (9.994 -> 999, 9.995 -> 1000).

    Raises:
        ValueError: If the value is not a finite number or is too large to
            hold in cents.
    """
    if isinstance(value, str) and not PLAIN_DECIMAL.fullmatch(value.strip()):
        raise ValueError(f"Not a number: {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}") from None

    if not amount.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")

    try:
        return Money(int(amount.quantize(CENT, rounding=ROUND_HALF_UP) * 100))
    except InvalidOperation:
        raise ValueError(f"Amount out of range: {value!r}") from None


def format_money(amount: Money) -> str:
    """Format cents as the canonical two-decimal string.

    Args:
        amount: Amount in cents.

    Returns:
        String such as "90.01" or "-5.00" (no currency symbol, no grouping).
    """
    sign = "-" if amount < 0 else ""
    cents = abs(amount)
    return f"{sign}{cents // 100}.{cents % 100:02d}"
