"""Config loading and normalization for convex-skills."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from convex_skills.config.model import SkillsConfig, WatchConfig
from convex_skills.constants.config import CONFIG_FILENAME
from convex_skills.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SkillsConfig:
    """Load and validate config from ``convex-skills.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillsConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    logger.debug("Loaded config from %s", path)

    target = raw.get("target")
    if target is not None and (not isinstance(target, str) or not target.strip()):
        raise ConfigError("target must be a non-empty string")

    link = raw.get("link", False)
    if not isinstance(link, bool):
        raise ConfigError("link must be a boolean")

    cooldown = raw.get("reminder_cooldown_s", SkillsConfig.reminder_cooldown_s)
    if isinstance(cooldown, bool) or not isinstance(cooldown, (int, float)) or cooldown <= 0:
        raise ConfigError("reminder_cooldown_s must be a positive number")

    watch_raw = raw.get("watch", {})
    if watch_raw is None:
        watch_raw = {}
    if not isinstance(watch_raw, dict):
        raise ConfigError("watch must be a mapping")

    return SkillsConfig(
        target=target.strip() if target else None,
        link=link,
        watch=_build_watch_config(watch_raw),
        reminder_cooldown_s=float(cooldown),
    )


def _build_watch_config(raw: dict[str, Any]) -> WatchConfig:
    """Build a WatchConfig from the raw ``watch`` YAML block."""
    defaults = WatchConfig()

    quiet_period_ms = raw.get("quiet_period_ms", defaults.quiet_period_ms)
    if isinstance(quiet_period_ms, bool) or not isinstance(quiet_period_ms, int) or quiet_period_ms <= 0:
        raise ConfigError("watch.quiet_period_ms must be a positive integer")

    return WatchConfig(
        directory=_ensure_name(raw.get("directory", defaults.directory), "watch.directory"),
        quiet_period_ms=quiet_period_ms,
        schema_filename=_ensure_name(raw.get("schema_filename", defaults.schema_filename), "watch.schema_filename"),
        exclude_segment=_ensure_name(raw.get("exclude_segment", defaults.exclude_segment), "watch.exclude_segment"),
    )


def _ensure_name(value: Any, key_name: str) -> str:
    """Require a non-empty string, raising ConfigError on type mismatch."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()
