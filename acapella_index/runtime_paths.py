"""Runtime path helpers for source, installed and frozen executable modes."""

from __future__ import annotations

from pathlib import Path
import sys


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Return the folder holding the `acapella_index` package resources."""
    if is_frozen():
        return Path(getattr(sys, "_MEIPASS", Path(sys.executable).parent)) / "acapella_index"
    return Path(__file__).resolve().parent


def program_root() -> Path:
    """Return the folder the scan root and manifest live in.

    Frozen builds use the executable's folder and source checkouts the
    project root. An installed package uses the current working directory.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    checkout = Path(__file__).resolve().parent.parent
    if (checkout / "pyproject.toml").is_file():
        return checkout
    return Path.cwd()


def config_path(*parts: str) -> Path:
    """Resolve a bundled config file across source/frozen layouts."""
    return package_root().joinpath("config", *parts)
