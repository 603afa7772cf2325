"""File names used by the OpenCode plugin installer."""

from __future__ import annotations

OPENCODE_CONFIG_FILENAME: str = "opencode.json"
OPENCODE_DIRNAME: str = ".opencode"
OPENCODE_AGENTS_DIRNAME: str = "agents"
OPENCODE_COMMANDS_DIRNAME: str = "commands"

OPENCODE_AGENT_FILES: tuple[str, ...] = ("convex-build.md", "convex-debug.md")
OPENCODE_COMMAND_FILES: tuple[str, ...] = ("convex-init.md", "convex-deploy.md", "convex-logs.md")

GITIGNORE_FILENAME: str = ".gitignore"
GITIGNORE_MARKER: str = ".opencode/"
GITIGNORE_BLOCK: str = "\n# OpenCode\n.opencode/\n"

EDIT_TOOL_NAMES: frozenset[str] = frozenset({"edit_file", "write_file"})
