"""Shared type aliases for convex-skills."""

from .common import ChangeKind, InstallAction, JsonObject, JsonScalar, JsonValue, RawEventKind, WatchState

__all__ = [
    "ChangeKind",
    "InstallAction",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "RawEventKind",
    "WatchState",
]
