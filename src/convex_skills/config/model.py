"""Config data model for convex-skills."""

from __future__ import annotations

from dataclasses import dataclass

from convex_skills.constants.watch import (
    CONVEX_DIRNAME,
    DEFAULT_QUIET_PERIOD_MS,
    DEFAULT_REMINDER_COOLDOWN_S,
    GENERATED_SEGMENT,
    SCHEMA_FILENAME,
)


@dataclass(frozen=True)
class WatchConfig:
    """Settings for the sync watcher."""

    directory: str = CONVEX_DIRNAME
    quiet_period_ms: int = DEFAULT_QUIET_PERIOD_MS
    schema_filename: str = SCHEMA_FILENAME
    exclude_segment: str = GENERATED_SEGMENT

    @property
    def quiet_period(self) -> float:
        """Quiet period in seconds."""
        return self.quiet_period_ms / 1000


@dataclass(frozen=True)
class SkillsConfig:
    """Resolved project config."""

    target: str | None = None
    link: bool = False
    watch: WatchConfig = WatchConfig()
    reminder_cooldown_s: float = DEFAULT_REMINDER_COOLDOWN_S
