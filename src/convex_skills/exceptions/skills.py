"""Skill lookup and project-edit exceptions."""

from __future__ import annotations

from convex_skills.exceptions.base import ConvexSkillsError


class SkillNotFoundError(ConvexSkillsError, LookupError):
    """Raised when a requested skill does not exist."""

    def __init__(self, skill_id: str) -> None:
        super().__init__(f"Skill not found: {skill_id}")
        self.skill_id = skill_id


class GeneratedFileEditError(ConvexSkillsError, PermissionError):
    """Raised when a tool tries to edit a file under ``convex/_generated/``."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot edit auto-generated file: {path}")
        self.path = path
