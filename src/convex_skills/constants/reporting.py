"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_BOLD: str = "\033[1m"
ANSI_CYAN: str = "\033[36m"
ANSI_DIM: str = "\033[2m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"

ACTION_COLORS: dict[str, str] = {
    "installed": ANSI_GREEN,
    "linked": ANSI_CYAN,
    "created": ANSI_GREEN,
    "updated": ANSI_GREEN,
    "removed": ANSI_YELLOW,
    "skipped": ANSI_DIM,
}
