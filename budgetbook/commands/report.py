"""List and report commands for viewing purchases."""

import sys

from rich.markup import escape
from rich.table import Table

from budgetbook.commands.common import LedgerOptions, console, open_ledger
from budgetbook.domain.categories import category_of, parse_category
from budgetbook.domain.errors import UnknownCategory
from budgetbook.domain.ledger import Ledger
from budgetbook.domain.models import Label, Money
from budgetbook.domain.money import format_money
from budgetbook.domain.report import CategoryTotals, PurchaseListing

EMPTY_LIST_MESSAGE = "[yellow]The purchase list is empty![/yellow]"


def render_labels(title: str, labels: list[Label], total: Money) -> None:
    """Render purchase labels under a title, followed by their total.

    Args:
        title: Heading such as "All" or "Food".
        labels: Labels in display order.
        total: Sum of the listed prices in cents.
    """
    console.print(f"\n[bold]{escape(title)}:[/bold]")
    for label in labels:
        console.print(escape(label), highlight=False)
    console.print(f"[bold]Total sum:[/bold] ${format_money(total)}")


def render_listing(title: str, listing: PurchaseListing | None) -> None:
    """Render a listing, or the empty-list message if there is none."""
    if listing is None:
        console.print(EMPTY_LIST_MESSAGE)
        return
    render_labels(title, listing.labels, listing.total)


def render_type_totals(totals: CategoryTotals) -> None:
    """Render per-category totals, largest first, then the overall total."""
    table = Table(title="Types")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")

    for entry in totals.categories:
        table.add_row(entry.category.title, f"${format_money(entry.amount)}")

    console.print(table)
    console.print(f"[bold]Total sum:[/bold] ${format_money(totals.total)}")


def render_sorted_all(ledger: Ledger) -> None:
    """Render every purchase, most expensive first."""
    listing = ledger.listing()
    if listing is None:
        console.print(EMPTY_LIST_MESSAGE)
        return
    render_labels("All", ledger.all_purchases_sorted_descending(), listing.total)


def render_sorted_category(ledger: Ledger, code: int) -> None:
    """Render one category's purchases, most expensive first.

    Raises:
        UnknownCategory: If the code is not in the taxonomy.
    """
    labels = ledger.purchases_for_category(code)
    listing = ledger.listing(code)
    if labels is None or listing is None:
        console.print(EMPTY_LIST_MESSAGE)
        return
    render_labels(listing_title(code), labels, listing.total)


def listing_title(code: int) -> str:
    return category_of(code).title


def resolve_category_code(category: str) -> int:
    """Resolve a category code or name, exiting with status 1 if unknown."""
    try:
        return parse_category(category).code
    except UnknownCategory:
        console.print(f"[red]Unknown category: {escape(category)}[/red]")
        console.print("[dim]Use 1-4 or one of: food, clothes, entertainment, other[/dim]")
        sys.exit(1)


def list_command(options: LedgerOptions, category: str | None = None) -> None:
    """List purchases in recording order, for one category or all."""
    ledger = open_ledger(options)

    if ledger.is_empty:
        console.print(EMPTY_LIST_MESSAGE)
        return

    if category is None:
        render_listing("All", ledger.listing())
        return

    code = resolve_category_code(category)
    render_listing(listing_title(code), ledger.listing(code))


def report_command(options: LedgerOptions, by_type: bool = False, category: str | None = None) -> None:
    """Show purchases sorted by price: all, totals per type, or one category."""
    ledger = open_ledger(options)

    if by_type:
        render_type_totals(ledger.totals_by_category())
    elif category is not None:
        render_sorted_category(ledger, resolve_category_code(category))
    else:
        render_sorted_all(ledger)
