"""Store layer - provides persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from budgetbook.store.ledger_file import (
    get_default_ledger_path,
    get_xdg_data_home,
    ledger_file_exists,
    load_ledger,
    save_ledger,
)

__all__ = [
    "get_default_ledger_path",
    "get_xdg_data_home",
    "ledger_file_exists",
    "load_ledger",
    "save_ledger",
]
