"""Lightweight YAML frontmatter extraction for SKILL.md files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


def read_frontmatter(path: Path) -> dict[str, Any]:
    """Return the YAML frontmatter mapping of *path*, or an empty dict.

    Read and parse failures are logged and treated as missing frontmatter.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return {}

    text = text.lstrip("\ufeff")
    if not text.startswith(FRONTMATTER_DELIMITER):
        return {}

    end = text.find(f"\n{FRONTMATTER_DELIMITER}", len(FRONTMATTER_DELIMITER))
    if end == -1:
        end = text.find("\n...", len(FRONTMATTER_DELIMITER))
    if end == -1:
        return {}

    try:
        payload = yaml.safe_load(text[len(FRONTMATTER_DELIMITER) : end])
    except yaml.YAMLError as exc:
        logger.warning("Malformed YAML frontmatter in %s: %s", path, exc)
        return {}

    return payload if isinstance(payload, dict) else {}


def frontmatter_string(frontmatter: dict[str, Any], key: str) -> str | None:
    """Return a stripped, non-empty string field from *frontmatter*."""
    value = frontmatter.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
