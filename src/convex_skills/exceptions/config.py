"""Configuration-related exceptions."""

from __future__ import annotations

from convex_skills.exceptions.base import ConvexSkillsError


class ConfigError(ConvexSkillsError, ValueError):
    """Raised when ``convex-skills.yaml`` is invalid."""


class ConfigParseError(ConvexSkillsError, ValueError):
    """Raised when project metadata such as ``package.json`` is malformed.

    Callers recover from this locally by falling back to a default value.
    """
