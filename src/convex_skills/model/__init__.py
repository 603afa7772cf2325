"""Core data models for convex-skills."""

from .entities import ChangeEvent, ConvexContext, FunctionInfo, InstallResult, SettledChange, SkillSummary

__all__ = [
    "ChangeEvent",
    "ConvexContext",
    "FunctionInfo",
    "InstallResult",
    "SettledChange",
    "SkillSummary",
]
