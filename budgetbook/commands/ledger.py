"""Ledger commands: income, purchases and balance."""

import sys

from rich.markup import escape

from budgetbook.commands.common import LedgerOptions, console, open_ledger, persist_ledger
from budgetbook.domain.categories import parse_category
from budgetbook.domain.errors import InsufficientFunds, MalformedEntry, UnknownCategory
from budgetbook.domain.money import format_money


def income_command(options: LedgerOptions, amount: str) -> None:
    """Add income to the balance and save."""
    ledger = open_ledger(options)

    try:
        ledger.add_income(amount)
    except ValueError:
        console.print(f"[red]Invalid amount: {escape(amount)}[/red]")
        sys.exit(1)

    persist_ledger(ledger, options)
    console.print("[green]✓[/green] Income was added!")
    console.print(f"[dim]Balance: ${ledger.balance()}[/dim]")


def buy_command(options: LedgerOptions, category: str, entry: str) -> None:
    """Record a purchase against the balance and save.

    Args:
        options: Purchases file options.
        category: Category code (1-4) or name.
        entry: Purchase text "<name> $<price>".
    """
    ledger = open_ledger(options)

    try:
        purchase = ledger.add_purchase(parse_category(category), entry)
    except UnknownCategory:
        console.print(f"[red]Unknown category: {escape(category)}[/red]")
        console.print("[dim]Use 1-4 or one of: food, clothes, entertainment, other[/dim]")
        sys.exit(1)
    except MalformedEntry as e:
        console.print(f"[red]Invalid purchase: {escape(e.reason)}[/red]")
        console.print('[dim]Expected "<name> $<price>", e.g. "Lunch $9.99"[/dim]')
        sys.exit(1)
    except InsufficientFunds as e:
        console.print(f"[red]Not enough income to add this purchase: {escape(entry)}[/red]")
        console.print(f"[dim]Balance: ${format_money(e.balance)}[/dim]")
        sys.exit(1)

    persist_ledger(ledger, options)
    console.print(f"[green]✓[/green] Purchase was added: {escape(purchase.label)} ({purchase.category.title})")
    console.print(f"[dim]Balance: ${ledger.balance()}[/dim]")


def balance_command(options: LedgerOptions) -> None:
    """Show the current balance."""
    ledger = open_ledger(options)
    console.print(f"Balance: ${ledger.balance()}")
