"""Human-readable stdout output for skill listings, help and install results."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from convex_skills.constants.branding import (
    CLI_DESCRIPTION,
    CLI_EXAMPLES,
    LIST_TITLE,
    PROGRAM_NAME,
    SKILL_ID_COLUMN_WIDTH,
)
from convex_skills.constants.reporting import ACTION_COLORS, ANSI_BOLD, ANSI_RESET
from convex_skills.model import ConvexContext, InstallResult, SkillSummary

_ACTION_LABELS: dict[str, str] = {
    "installed": "Installed",
    "linked": "Linked",
    "created": "Created",
    "updated": "Updated",
    "removed": "Removed",
    "skipped": "Skipping",
}

_COMMAND_HELP: tuple[tuple[str, str], ...] = (
    ("list", "List all available skills"),
    ("install <skill>", "Install a skill to .claude/skills/"),
    ("install-all", "Install all skills to .claude/skills/"),
    ("install-templates", "Install template files to your project"),
    ("install-opencode", "Install OpenCode agents and commands"),
    ("uninstall-opencode", "Remove OpenCode agents and commands"),
    ("path <skill>", "Print the path to a skill file"),
    ("show <skill>", "Print a skill's content"),
    ("browse", "Browse skills interactively"),
    ("context", "Print the deployment context of a Convex project"),
    ("watch", "Watch convex/ and report settled changes"),
    ("validate-config", "Validate convex-skills.yaml"),
)

_OPTION_HELP: tuple[tuple[str, str], ...] = (
    ("--dir <path>", "Target directory (default: current directory)"),
    ("--target <name|path>", "Install target: claude, codex, agents, or a path"),
    ("--link", "Symlink SKILL.md instead of copying"),
    ("--force", "Overwrite an existing opencode.json"),
    ("--skip-config", "Don't create opencode.json"),
    ("--help, -h", "Show this help message"),
)


class StdoutReporter:
    """Formats command output as plain or ANSI-colored text."""

    def __init__(self, *, color: bool = False) -> None:
        self._color = color

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{ANSI_RESET}" if self._color and color else text

    def _skill_rows(self, skills: Sequence[SkillSummary]) -> list[str]:
        return [f"  {skill.id.ljust(SKILL_ID_COLUMN_WIDTH)} {skill.description}" for skill in skills]

    def render_skill_list(self, skills: Sequence[SkillSummary]) -> str:
        """Render the ``list`` command output."""
        lines = ["", self._paint(LIST_TITLE, ANSI_BOLD), "", *self._skill_rows(skills), ""]
        return "\n".join(lines)

    def render_help(self, skills: Sequence[SkillSummary]) -> str:
        """Render the full help text, including the available skills."""
        lines = [
            "",
            self._paint(CLI_DESCRIPTION, ANSI_BOLD),
            "",
            "USAGE:",
            f"  {PROGRAM_NAME} <command> [options]",
            "",
            "COMMANDS:",
            *(f"  {usage.ljust(24)}{text}" for usage, text in _COMMAND_HELP),
            "",
            "OPTIONS:",
            *(f"  {usage.ljust(24)}{text}" for usage, text in _OPTION_HELP),
            "",
            "EXAMPLES:",
            *(f"  {example}" for example in CLI_EXAMPLES),
            "",
            "AVAILABLE SKILLS:",
            *self._skill_rows(skills),
            "",
        ]
        return "\n".join(lines)

    def render_install_result(self, result: InstallResult) -> str:
        """Render one line per installed, linked or skipped file."""
        label = self._paint(_ACTION_LABELS.get(result.action, result.action), ACTION_COLORS.get(result.action, ""))
        if result.action == "skipped":
            reason = result.reason or "already exists"
            return f"{label} {result.name} ({reason})"
        if result.action in ("installed", "linked"):
            return f"{label} {result.name} to {result.destination}"
        return f"{label} {result.name}"

    def render_install_summary(self, results: Sequence[InstallResult], target: Path) -> str:
        installed = sum(1 for result in results if result.action != "skipped")
        return f"\nDone! Installed {installed} skills to {target}"

    def render_context(self, context: ConvexContext) -> str:
        """Render the deployment context as an indented summary."""
        lines = [
            f"Project:   {context.project_name}",
            f"Tables:    {', '.join(context.tables) or '(none)'}",
            f"Functions: {len(context.functions)}",
        ]
        lines.extend(f"  {fn.type.ljust(10)} {fn.file}:{fn.name}" for fn in context.functions)
        lines.append(f"Env vars:  {', '.join(context.env_vars) or '(none)'}")
        if context.schema_hash:
            lines.append(f"Schema:    {context.schema_hash}")
        return "\n".join(lines)
