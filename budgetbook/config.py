"""Configuration file management for budgetbook.

The config file is optional. Two keys are read:

    ledger_file = "~/.local/share/budgetbook/purchases.txt"
    strict_load = true

Keys missing from the file take their default values.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from budgetbook.store.ledger_file import get_default_ledger_path


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Path of budgetbook's config.toml inside the XDG config directory."""
    return get_xdg_config_home() / "budgetbook" / "config.toml"


def default_config() -> dict[str, Any]:
    """Configuration used when no config file exists."""
    return {
        "ledger_file": str(get_default_ledger_path()),
        "strict_load": True,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Write the default ledger_file and strict_load settings.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Read the config file and fill in any keys it leaves out.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Defaults overlaid with the file's values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return default_config() | tomllib.load(f)


def load_config_or_default(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, falling back to defaults if the file doesn't exist."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return default_config()


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Write settings as TOML, creating the config directory if needed.

    The file is made readable by the owner only, since ledger_file may
    reveal where personal spending records are kept.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_ledger_path(config: dict[str, Any]) -> Path:
    """Get the purchases file path from configuration, expanding "~"."""
    return Path(config["ledger_file"]).expanduser()


def is_strict_load(config: dict[str, Any]) -> bool:
    """Whether loading should stop at the first malformed line.

    Raises:
        ValueError: If strict_load is not a TOML boolean.
    """
    strict = config["strict_load"]
    if not isinstance(strict, bool):
        raise ValueError(f"strict_load must be true or false, got {strict!r}")
    return strict
