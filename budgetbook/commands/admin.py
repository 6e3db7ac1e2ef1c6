"""Admin commands for initializing configuration."""

import sys

from budgetbook.commands.common import console
from budgetbook.config import create_default_config, default_config, get_config_path


def init_command(force: bool = False) -> None:
    """Create the default configuration file."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if not force and config_path.exists():
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'budgetbook init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Purchases file: {default_config()['ledger_file']}[/dim]")
