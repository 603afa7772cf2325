"""Configuration defaults, file names and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "convex-skills.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"target", "link", "watch", "reminder_cooldown_s"})
ALLOWED_WATCH_KEYS: frozenset[str] = frozenset({"directory", "quiet_period_ms", "schema_filename", "exclude_segment"})
