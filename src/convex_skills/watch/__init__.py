"""Debounced change watching for Convex source trees."""

from .classify import classify_change, generated_path_excluded, make_exclusion
from .debouncer import ChangeDebouncer
from .watcher import WatchHandle, start_watching

__all__ = [
    "ChangeDebouncer",
    "WatchHandle",
    "classify_change",
    "generated_path_excluded",
    "make_exclusion",
    "start_watching",
]
