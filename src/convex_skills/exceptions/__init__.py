"""Shared exception hierarchy for convex-skills."""

from __future__ import annotations

from .base import ConvexSkillsError
from .config import ConfigError, ConfigParseError
from .skills import GeneratedFileEditError, SkillNotFoundError
from .watch import WatchTargetUnavailableError

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConvexSkillsError",
    "GeneratedFileEditError",
    "SkillNotFoundError",
    "WatchTargetUnavailableError",
]
