"""CLI entry point for budgetbook."""

import logging
import sys
import tomllib
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from budgetbook.commands.admin import init_command
from budgetbook.commands.common import LedgerOptions, console
from budgetbook.commands.ledger import balance_command, buy_command, income_command
from budgetbook.commands.menu import menu_command
from budgetbook.commands.report import list_command, report_command
from budgetbook.config import get_ledger_path, is_strict_load, load_config_or_default

app = typer.Typer(
    name="budgetbook",
    help="A personal budgeting ledger - track your balance and categorized purchases",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    file: str = typer.Option(None, "--file", help="Purchases file (overrides config)"),
    lenient: bool = typer.Option(False, "--lenient", help="Skip malformed lines when loading"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """A personal budgeting ledger - track your balance and categorized purchases."""
    configure_logging(verbose)

    try:
        config = load_config_or_default()
        strict = is_strict_load(config) and not lenient
        path = Path(file).expanduser() if file else get_ledger_path(config)
    except (tomllib.TOMLDecodeError, KeyError, ValueError) as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(1)

    ctx.obj = LedgerOptions(path=path, strict=strict)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize budgetbook configuration."""
    init_command(force)


@app.command()
def income(ctx: typer.Context, amount: str) -> None:
    """Add income to your balance."""
    income_command(ctx.obj, amount)


@app.command()
def buy(
    ctx: typer.Context,
    category: str = typer.Argument(..., help="Category code (1-4) or name"),
    entry: str = typer.Argument(..., help='Purchase as "<name> $<price>"'),
) -> None:
    """Record a purchase against your balance."""
    buy_command(ctx.obj, category, entry)


@app.command()
def balance(ctx: typer.Context) -> None:
    """Show your balance."""
    balance_command(ctx.obj)


@app.command(name="list")
def list_purchases(
    ctx: typer.Context,
    category: str = typer.Argument(None, help="Category code (1-4) or name (default: all)"),
) -> None:
    """List your purchases."""
    list_command(ctx.obj, category)


@app.command()
def report(
    ctx: typer.Context,
    by_type: bool = typer.Option(False, "--by-type", help="Show totals per category"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category (code or name)"),
) -> None:
    """Show your purchases sorted by price."""
    report_command(ctx.obj, by_type, category)


@app.command()
def menu(ctx: typer.Context) -> None:
    """Start an interactive session."""
    menu_command(ctx.obj)


if __name__ == "__main__":
    app()
