"""Lookup of bundled skills by identifier."""

from __future__ import annotations

import logging
from pathlib import Path

from convex_skills.constants.skills import (
    DATA_ROOT,
    SKILL_CATALOG,
    SKILL_MARKDOWN_FILENAME,
    SKILLS_DIRNAME,
    TEMPLATES_DIRNAME,
)
from convex_skills.exceptions import SkillNotFoundError
from convex_skills.model import SkillSummary
from convex_skills.skills.frontmatter import frontmatter_string, read_frontmatter

logger = logging.getLogger(__name__)

_CATALOG_ORDER: dict[str, int] = {skill_id: index for index, (skill_id, _) in enumerate(SKILL_CATALOG)}
_CATALOG_DESCRIPTIONS: dict[str, str] = dict(SKILL_CATALOG)


def get_skills_path() -> Path:
    """Return the directory holding bundled skills."""
    return DATA_ROOT / SKILLS_DIRNAME


def get_templates_path() -> Path:
    """Return the directory holding bundled templates."""
    return DATA_ROOT / TEMPLATES_DIRNAME


def _display_name(skill_id: str) -> str:
    return " ".join(part.capitalize() for part in skill_id.split("-"))


class SkillRepository:
    """Skills stored as ``<root>/<id>/SKILL.md``."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root if root is not None else get_skills_path()

    @property
    def root(self) -> Path:
        return self._root

    def skill_path(self, skill_id: str) -> Path:
        """Return the SKILL.md path for *skill_id*.

        Raises:
            SkillNotFoundError: If the skill does not exist.
        """
        if not skill_id or "/" in skill_id or "\\" in skill_id or skill_id in (".", ".."):
            raise SkillNotFoundError(skill_id)
        path = self._root / skill_id / SKILL_MARKDOWN_FILENAME
        if not path.is_file():
            raise SkillNotFoundError(skill_id)
        return path

    def has_skill(self, skill_id: str) -> bool:
        try:
            self.skill_path(skill_id)
        except SkillNotFoundError:
            return False
        return True

    def get_skill(self, skill_id: str) -> str:
        """Return the markdown content of *skill_id*."""
        return self.skill_path(skill_id).read_text(encoding="utf-8")

    def skill_ids(self) -> list[str]:
        """Identifiers of every skill directory holding a SKILL.md, in listing order."""
        if not self._root.is_dir():
            logger.warning("Skills directory not found: %s", self._root)
            return []
        ids = [
            entry.name
            for entry in self._root.iterdir()
            if entry.is_dir() and (entry / SKILL_MARKDOWN_FILENAME).is_file()
        ]
        return sorted(ids, key=lambda skill_id: (_CATALOG_ORDER.get(skill_id, len(_CATALOG_ORDER)), skill_id))

    def list_skills(self) -> list[SkillSummary]:
        """Summaries of every skill, with frontmatter descriptions when present."""
        summaries: list[SkillSummary] = []
        for skill_id in self.skill_ids():
            path = self._root / skill_id / SKILL_MARKDOWN_FILENAME
            frontmatter = read_frontmatter(path)
            summaries.append(
                SkillSummary(
                    id=skill_id,
                    name=frontmatter_string(frontmatter, "title") or _display_name(skill_id),
                    description=(
                        frontmatter_string(frontmatter, "description") or _CATALOG_DESCRIPTIONS.get(skill_id, "")
                    ),
                    path=path,
                )
            )
        return summaries
