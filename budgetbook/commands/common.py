"""Shared helpers for commands that open and save the purchases file."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from budgetbook.domain.errors import FileUnavailable, ParseError
from budgetbook.domain.ledger import Ledger
from budgetbook.store.ledger_file import load_ledger, save_ledger

console = Console()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerOptions:
    """Where the purchases file lives and how strictly to read it."""

    path: Path
    strict: bool = True


def open_ledger(options: LedgerOptions) -> Ledger:
    """Create a ledger and merge the purchases file into it, if there is one.

    Exits with status 1 if the file cannot be parsed.
    """
    ledger = Ledger()
    try:
        load_ledger(ledger, options.path, strict=options.strict)
    except FileUnavailable as e:
        logger.debug("Starting with an empty ledger: %s", e)
    except ParseError as e:
        console.print(f"[red]Cannot load {options.path}: {e}[/red]", style="bold")
        console.print("[dim]Fix the line or rerun with --lenient to skip bad lines[/dim]")
        sys.exit(1)
    return ledger


def persist_ledger(ledger: Ledger, options: LedgerOptions) -> None:
    """Save the ledger, exiting with status 1 on filesystem errors."""
    try:
        save_ledger(ledger, options.path)
    except OSError as e:
        console.print(f"[red]Save failed: {e}[/red]", style="bold")
        sys.exit(1)
