"""Path exclusion and settled-change classification."""

from __future__ import annotations

from collections.abc import Callable

from convex_skills.constants.watch import (
    CHANGE_KIND_GENERIC,
    CHANGE_KIND_SCHEMA,
    GENERATED_SEGMENT,
    SCHEMA_FILENAME,
)
from convex_skills.types import ChangeKind


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


def generated_path_excluded(path: str, segment: str = GENERATED_SEGMENT) -> bool:
    """Return True when *path* lies inside the generated-output directory."""
    return segment in _normalize(path)


def make_exclusion(segment: str = GENERATED_SEGMENT) -> Callable[[str], bool]:
    """Build an exclusion predicate for a configured generated-output segment."""
    if not segment.endswith("/"):
        segment = f"{segment}/"

    def _exclude(path: str) -> bool:
        return generated_path_excluded(path, segment)

    return _exclude


def classify_change(path: str, schema_filename: str = SCHEMA_FILENAME) -> ChangeKind:
    """Classify a settled path by exact base-name match against the schema file name."""
    name = _normalize(path).rsplit("/", 1)[-1]
    if name == schema_filename:
        return CHANGE_KIND_SCHEMA
    return CHANGE_KIND_GENERIC
