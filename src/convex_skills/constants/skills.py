"""Bundled skill catalog, data locations and install targets."""

from __future__ import annotations

from pathlib import Path

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"

DATA_ROOT: Path = Path(__file__).resolve().parent.parent / "data"
SKILLS_DIRNAME: str = "skills"
TEMPLATES_DIRNAME: str = "templates"
OPENCODE_TEMPLATE_DIRNAME: str = "opencode"

# Ordered: the catalog order is the listing order.
SKILL_CATALOG: tuple[tuple[str, str], ...] = (
    ("convex-best-practices", "Guidelines for building production-ready Convex apps"),
    ("convex-functions", "Writing queries, mutations, actions, and HTTP actions"),
    ("convex-realtime", "Patterns for building reactive applications"),
    ("convex-schema-validator", "Database schema definition and validation"),
    ("convex-file-storage", "File upload, storage, and serving"),
    ("convex-agents", "Building AI agents with Convex"),
    ("convex-cron-jobs", "Scheduled functions and background tasks"),
    ("convex-http-actions", "HTTP endpoints and webhook handling"),
    ("convex-migrations", "Schema evolution and data migrations"),
    ("convex-security-check", "Quick security audit checklist"),
    ("convex-security-audit", "Deep security review patterns"),
    ("convex-component-authoring", "Creating reusable Convex components"),
)

DEFAULT_SKILLS_SUBDIR: str = ".claude/skills"
TARGET_ALIASES: dict[str, str] = {
    "claude": ".claude/skills",
    "codex": ".codex/skills",
    "agents": ".agents/skills",
}

CLAUDE_TEMPLATE_FILENAME: str = "CLAUDE.md"
SKILL_TEMPLATE_SUFFIX: str = ".md"
