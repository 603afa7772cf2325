"""File-level helpers for copying and linking installed files."""

from __future__ import annotations

import shutil
from pathlib import Path


def ensure_dir(path: Path) -> bool:
    """Create *path* and any missing parents. Returns True if it was created."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def copy_file(source: Path, destination: Path) -> None:
    """Copy *source* to *destination*, creating parent directories and overwriting."""
    ensure_dir(destination.parent)
    shutil.copyfile(source, destination)


def link_file(source: Path, destination: Path) -> bool:
    """Symlink *destination* to *source* unless something already exists there.

    Returns True when a new link was created.
    """
    ensure_dir(destination.parent)
    if destination.exists() or destination.is_symlink():
        return False
    destination.symlink_to(source.resolve())
    return True
