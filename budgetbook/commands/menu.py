"""Interactive menu session over a single in-memory ledger."""

from collections.abc import Callable

import typer
from rich.markup import escape

from budgetbook.commands.common import LedgerOptions, console
from budgetbook.commands.report import (
    EMPTY_LIST_MESSAGE,
    render_listing,
    render_sorted_all,
    render_sorted_category,
    render_type_totals,
)
from budgetbook.domain.categories import Category, category_of
from budgetbook.domain.errors import (
    FileUnavailable,
    InsufficientFunds,
    MalformedEntry,
    ParseError,
    UnknownCategory,
)
from budgetbook.domain.ledger import Ledger
from budgetbook.store.ledger_file import load_ledger, save_ledger

MAIN_MENU = [
    "1) Add income",
    "2) Add purchase",
    "3) Show list of purchases",
    "4) Balance",
    "5) Save",
    "6) Load",
    "7) Analyze (sort)",
    "0) Exit",
]

ANALYZE_MENU = [
    "1) Sort all purchases",
    "2) Sort by type",
    "3) Sort certain type",
    "4) Back",
]


def prompt_choice(text: str = "Choice") -> int:
    result: int = typer.prompt(text, type=int)
    return result


def display_category_menu(title: str, extra: list[str]) -> None:
    """Display the four categories followed by extra options."""
    console.print(f"\n[cyan]{title}[/cyan]")
    for category in Category:
        console.print(f"{category.code}) {category.title}")
    for line in extra:
        console.print(line)


def add_income(ledger: Ledger, options: LedgerOptions) -> None:
    amount = typer.prompt("\nEnter income", type=str)
    try:
        ledger.add_income(amount)
    except ValueError:
        console.print(f"[red]Invalid amount: {escape(amount)}[/red]")
        return
    console.print("Income was added!")


def add_purchase(ledger: Ledger, options: LedgerOptions) -> None:
    """Add purchases until the user picks Back."""
    while True:
        display_category_menu("Choose the type of purchase", ["5) Back"])
        code = prompt_choice()
        if code == 5:
            return

        try:
            category = category_of(code)
        except UnknownCategory:
            console.print("[red]Invalid category.[/red]")
            continue

        name = typer.prompt("\nEnter purchase name", type=str)
        price = typer.prompt("Enter its price", type=str)
        entry = f"{name} ${price}"

        try:
            ledger.add_purchase(category, entry)
        except MalformedEntry as e:
            console.print(f"[red]Invalid purchase: {escape(e.reason)}[/red]")
        except InsufficientFunds:
            console.print(f"\n[red]Not enough income to add this purchase: {escape(entry)}[/red]")
        else:
            console.print("Purchase was added!")


def show_purchases(ledger: Ledger, options: LedgerOptions) -> None:
    """List purchases by category until the user picks Back."""
    if ledger.is_empty:
        console.print(EMPTY_LIST_MESSAGE)
        return

    while True:
        display_category_menu("Choose the type of purchases", ["5) All", "6) Back"])
        code = prompt_choice()
        if code == 6:
            return
        if code == 5:
            render_listing("All", ledger.listing())
            continue

        try:
            render_listing(category_of(code).title, ledger.listing(code))
        except UnknownCategory:
            console.print("[red]Invalid category.[/red]")


def show_balance(ledger: Ledger, options: LedgerOptions) -> None:
    console.print(f"\nBalance: ${ledger.balance()}")


def save(ledger: Ledger, options: LedgerOptions) -> None:
    if ledger.is_empty:
        console.print("[yellow]Nothing to save: the purchase list is empty[/yellow]")
        return

    try:
        save_ledger(ledger, options.path)
    except OSError as e:
        console.print(f"[red]Save failed: {e}[/red]")
        return
    console.print("\nPurchases were saved!")


def load(ledger: Ledger, options: LedgerOptions) -> None:
    try:
        load_ledger(ledger, options.path, strict=options.strict)
    except FileUnavailable as e:
        console.print(f"[yellow]Nothing to load: {escape(e.reason)}[/yellow]")
        return
    except ParseError as e:
        console.print(f"[red]Load stopped at line {e.line_number}: {escape(e.reason)}[/red]")
        console.print("[dim]Lines before it were loaded[/dim]")
        return
    console.print("\nPurchases were loaded!")


def analyze(ledger: Ledger, options: LedgerOptions) -> None:
    """Show sorted reports until the user picks Back."""
    while True:
        console.print("\n[cyan]How do you want to sort?[/cyan]")
        for line in ANALYZE_MENU:
            console.print(line)

        choice = prompt_choice()
        if choice == 4:
            return

        if choice == 1:
            render_sorted_all(ledger)
        elif choice == 2:
            if ledger.is_empty:
                console.print(EMPTY_LIST_MESSAGE)
            else:
                render_type_totals(ledger.totals_by_category())
        elif choice == 3:
            display_category_menu("Choose the type of purchase", [])
            code = prompt_choice()
            try:
                render_sorted_category(ledger, code)
            except UnknownCategory:
                console.print("[red]Invalid category.[/red]")
        else:
            console.print("\n[red]Invalid sorting action.[/red]")


MenuAction = Callable[[Ledger, LedgerOptions], None]

ACTIONS: dict[int, MenuAction] = {
    1: add_income,
    2: add_purchase,
    3: show_purchases,
    4: show_balance,
    5: save,
    6: load,
    7: analyze,
}


def menu_command(options: LedgerOptions) -> None:
    """Run the interactive session until the user picks Exit.

    The session starts with an empty ledger; use Load to merge the
    purchases file into it.
    """
    ledger = Ledger()

    while True:
        console.print("[bold]Choose your action:[/bold]")
        for line in MAIN_MENU:
            console.print(line)

        choice = prompt_choice()
        if choice == 0:
            console.print("\nBye!")
            return

        action = ACTIONS.get(choice)
        if action is None:
            console.print("[red]Invalid action.[/red]")
        else:
            action(ledger, options)
        console.print()
