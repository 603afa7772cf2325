"""Defaults for the change watcher and sync sessions."""

from __future__ import annotations

from convex_skills.types import ChangeKind, WatchState

CONVEX_DIRNAME: str = "convex"
SCHEMA_FILENAME: str = "schema.ts"
GENERATED_SEGMENT: str = "_generated/"

DEFAULT_QUIET_PERIOD_MS: int = 1000
DEFAULT_REMINDER_COOLDOWN_S: float = 30.0

WATCH_STATE_IDLE: WatchState = "idle"
WATCH_STATE_WATCHING: WatchState = "watching"
WATCH_STATE_DISPATCHING: WatchState = "dispatching"
WATCH_STATE_STOPPED: WatchState = "stopped"

CHANGE_KIND_SCHEMA: ChangeKind = "schema"
CHANGE_KIND_GENERIC: ChangeKind = "generic"
