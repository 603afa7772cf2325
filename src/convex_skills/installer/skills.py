"""Copy or link bundled skills and templates into a project."""

from __future__ import annotations

import logging
from pathlib import Path

from convex_skills.constants.skills import (
    CLAUDE_TEMPLATE_FILENAME,
    DEFAULT_SKILLS_SUBDIR,
    SKILL_MARKDOWN_FILENAME,
    SKILL_TEMPLATE_SUFFIX,
    SKILLS_DIRNAME,
    TARGET_ALIASES,
)
from convex_skills.io import copy_file, ensure_dir, link_file
from convex_skills.model import InstallResult
from convex_skills.skills import SkillRepository, get_templates_path

logger = logging.getLogger(__name__)


def resolve_target_skills_dir(base_dir: Path, target: str | None = None) -> Path:
    """Resolve ``--target`` to the directory that receives ``<id>/SKILL.md``.

    ``None`` selects ``.claude/skills``. Known aliases map to their dotted
    directory; anything else is a path relative to *base_dir*, with
    ``skills`` appended unless the path already ends with it.
    """
    if not target:
        return base_dir / DEFAULT_SKILLS_SUBDIR

    alias = TARGET_ALIASES.get(target)
    if alias:
        return base_dir / alias

    resolved = (base_dir / target).resolve()
    return resolved if resolved.name.endswith(SKILLS_DIRNAME) else resolved / SKILLS_DIRNAME


def install_skill(
    repository: SkillRepository,
    skill_id: str,
    target_skills_dir: Path,
    *,
    link: bool = False,
) -> InstallResult:
    """Install one skill as ``<target>/<id>/SKILL.md``.

    Copies overwrite an existing file. Links are only created when nothing
    exists at the destination yet.

    Raises:
        SkillNotFoundError: If *skill_id* is not in *repository*.
    """
    source = repository.skill_path(skill_id)
    destination = target_skills_dir / skill_id / SKILL_MARKDOWN_FILENAME

    if link:
        created = link_file(source, destination)
        logger.debug("Link %s -> %s (created=%s)", destination, source, created)
        return InstallResult(name=skill_id, destination=destination, action="linked")

    copy_file(source, destination)
    logger.debug("Copied %s -> %s", source, destination)
    return InstallResult(name=skill_id, destination=destination, action="installed")


def install_all_skills(
    repository: SkillRepository,
    target_skills_dir: Path,
    *,
    link: bool = False,
) -> list[InstallResult]:
    """Install every skill in *repository*."""
    return [
        install_skill(repository, skill_id, target_skills_dir, link=link) for skill_id in repository.skill_ids()
    ]


def install_templates(base_dir: Path, templates_dir: Path | None = None) -> list[InstallResult]:
    """Copy the CLAUDE.md template and skill templates without overwriting existing files."""
    templates_dir = templates_dir if templates_dir is not None else get_templates_path()
    results: list[InstallResult] = []

    claude_template = templates_dir / CLAUDE_TEMPLATE_FILENAME
    if claude_template.is_file():
        results.append(_copy_if_missing(claude_template, base_dir / CLAUDE_TEMPLATE_FILENAME))

    skill_templates_dir = templates_dir / SKILLS_DIRNAME
    if skill_templates_dir.is_dir():
        target_skills_dir = base_dir / DEFAULT_SKILLS_SUBDIR
        ensure_dir(target_skills_dir)
        for template in sorted(skill_templates_dir.iterdir()):
            if template.is_file() and template.name.endswith(SKILL_TEMPLATE_SUFFIX):
                results.append(_copy_if_missing(template, target_skills_dir / template.name))

    return results


def _copy_if_missing(source: Path, destination: Path) -> InstallResult:
    if destination.exists():
        return InstallResult(name=source.name, destination=destination, action="skipped", reason="already exists")
    copy_file(source, destination)
    return InstallResult(name=source.name, destination=destination, action="installed")
