"""Root exception type."""

from __future__ import annotations


class ConvexSkillsError(Exception):
    """Base class for all convex-skills errors."""
