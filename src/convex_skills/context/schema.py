"""Best-effort table-name extraction from ``convex/schema.ts``."""

from __future__ import annotations

import hashlib

from convex_skills.constants.context import SCHEMA_HASH_LENGTH, TABLE_DEFINITION_PATTERN


def extract_table_names(source: str) -> list[str]:
    """Return identifiers that precede ``: defineTable(`` in source order.

    This is a regular expression scan, not a TypeScript parser: commented-out
    tables are still reported and tables built by helper functions are missed.
    """
    return [match.group(1) for match in TABLE_DEFINITION_PATTERN.finditer(source)]


def schema_hash(source: str) -> str:
    """Short SHA-256 digest used to detect schema changes between sessions."""
    return hashlib.sha256(source.encode("utf-8")).hexdigest()[:SCHEMA_HASH_LENGTH]
