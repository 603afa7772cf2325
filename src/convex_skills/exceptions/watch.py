"""Watcher exceptions."""

from __future__ import annotations

from pathlib import Path

from convex_skills.exceptions.base import ConvexSkillsError


class WatchTargetUnavailableError(ConvexSkillsError, OSError):
    """Raised or reported when the watched root is missing or becomes inaccessible."""

    def __init__(self, root: Path, reason: str = "directory does not exist") -> None:
        super().__init__(f"Watch target unavailable: {root} ({reason})")
        self.root = root
        self.reason = reason
