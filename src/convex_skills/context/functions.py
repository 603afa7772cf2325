"""Best-effort discovery of exported Convex functions."""

from __future__ import annotations

import logging
from pathlib import Path

from convex_skills.constants.context import (
    FUNCTION_EXPORT_PATTERN,
    FUNCTION_SOURCE_SUFFIXES,
    INTERNAL_FUNCTION_TYPES,
)
from convex_skills.constants.watch import GENERATED_SEGMENT, SCHEMA_FILENAME
from convex_skills.model import FunctionInfo
from convex_skills.watch.classify import generated_path_excluded

logger = logging.getLogger(__name__)


def extract_functions(source: str, file: str) -> list[FunctionInfo]:
    """Return ``export const name = query(...)``-style declarations in *source*."""
    functions: list[FunctionInfo] = []
    for match in FUNCTION_EXPORT_PATTERN.finditer(source):
        kind = INTERNAL_FUNCTION_TYPES.get(match.group(2), match.group(2))
        functions.append(FunctionInfo(name=match.group(1), type=kind, file=file))  # type: ignore[arg-type]
    return functions


def scan_functions(convex_dir: Path, *, schema_filename: str = SCHEMA_FILENAME) -> list[FunctionInfo]:
    """Scan every module under *convex_dir*, skipping generated files and the schema."""
    functions: list[FunctionInfo] = []
    for path in sorted(convex_dir.rglob("*")):
        if not path.is_file() or path.suffix not in FUNCTION_SOURCE_SUFFIXES:
            continue
        relative = path.relative_to(convex_dir).as_posix()
        if generated_path_excluded(relative, GENERATED_SEGMENT) or path.name == schema_filename:
            continue
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            continue
        functions.extend(extract_functions(source, relative))
    return functions
