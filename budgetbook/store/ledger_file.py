"""Purchases file location, saving and loading."""

import logging
import os
from pathlib import Path

from budgetbook.domain.errors import FileUnavailable
from budgetbook.domain.ledger import Ledger

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_default_ledger_path() -> Path:
    """Get the default purchases file path (XDG compliant)."""
    return get_xdg_data_home() / "budgetbook" / "purchases.txt"


def ledger_file_exists(path: Path | None = None) -> bool:
    """Check if the purchases file exists.

    Args:
        path: Path to check. If None, uses default location.

    Returns:
        True if the file exists, False otherwise.
    """
    if path is None:
        path = get_default_ledger_path()
    return path.exists()


def save_ledger(ledger: Ledger, path: Path | None = None) -> None:
    """Write the ledger to the purchases file, replacing its contents.

    Args:
        ledger: Ledger to save.
        path: Path to the purchases file. If None, uses default location.

    Raises:
        OSError: If the file cannot be written.
    """
    if path is None:
        path = get_default_ledger_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding=ENCODING) as f:
        f.write(ledger.encode())

    logger.debug("Saved %d purchases to %s", len(ledger.purchases), path)


def load_ledger(ledger: Ledger, path: Path | None = None, strict: bool = True) -> int:
    """Merge the purchases file into a ledger.

    Loading is additive: the file's balance is added to the ledger balance
    and its purchases are merged by label.

    Args:
        ledger: Ledger to merge into.
        path: Path to the purchases file. If None, uses default location.
        strict: Fail on the first bad line if True, skip bad lines otherwise.

    Returns:
        Number of records merged.

    Raises:
        FileUnavailable: If the file is missing or unreadable.
        ParseError: In strict mode, if a line cannot be decoded.
    """
    if path is None:
        path = get_default_ledger_path()

    try:
        with open(path, encoding=ENCODING) as f:
            merged = ledger.load_lines(f, strict=strict)
    except FileNotFoundError as e:
        raise FileUnavailable(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileUnavailable(path, str(e)) from e

    logger.debug("Loaded %d records from %s", merged, path)
    return merged
