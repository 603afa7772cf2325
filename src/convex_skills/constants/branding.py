"""Branding constants for help and terminal output."""

from __future__ import annotations

PROGRAM_NAME: str = "convex-skills"
CLI_TAGLINE: str = "Agent skills for building Convex applications"
CLI_DESCRIPTION: str = f"{PROGRAM_NAME} - {CLI_TAGLINE}"
LIST_TITLE: str = "Available Convex Skills:"
LIST_HINT: str = f"Run '{PROGRAM_NAME} list' to see available skills."
SKILL_ID_COLUMN_WIDTH: int = 30

CLI_EXAMPLES: tuple[str, ...] = (
    f"{PROGRAM_NAME} list",
    f"{PROGRAM_NAME} install convex-best-practices",
    f"{PROGRAM_NAME} install-all",
    f"{PROGRAM_NAME} install-all --target agents",
    f"{PROGRAM_NAME} install convex-functions --target .agents/skills",
    f"{PROGRAM_NAME} install convex-best-practices --target codex --link",
    f"{PROGRAM_NAME} install-templates",
    f"{PROGRAM_NAME} show convex-functions",
)
