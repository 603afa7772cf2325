"""Tests for skill lookup and listing."""

from __future__ import annotations

from pathlib import Path

import pytest

from convex_skills.constants.skills import SKILL_CATALOG
from convex_skills.exceptions import SkillNotFoundError
from convex_skills.skills import SkillRepository, get_skills_path, read_frontmatter


def test_list_orders_catalog_skills_first(repository: SkillRepository) -> None:
    assert [skill.id for skill in repository.list_skills()] == [
        "convex-best-practices",
        "convex-functions",
        "zz-custom",
    ]


def test_descriptions_prefer_frontmatter(repository: SkillRepository) -> None:
    summaries = {skill.id: skill for skill in repository.list_skills()}

    assert summaries["convex-functions"].description == "Writing functions"
    assert summaries["convex-functions"].name == "Convex Functions"
    assert summaries["zz-custom"].description == ""


def test_catalog_description_used_without_frontmatter(tmp_path: Path, make_skill) -> None:
    make_skill(tmp_path, "convex-migrations", None)

    [summary] = SkillRepository(tmp_path).list_skills()

    assert summary.description == "Schema evolution and data migrations"


def test_get_skill_returns_markdown(repository: SkillRepository) -> None:
    assert "Body." in repository.get_skill("convex-functions")


def test_skill_path_points_at_skill_md(repository: SkillRepository, skills_root: Path) -> None:
    assert repository.skill_path("zz-custom") == skills_root / "zz-custom" / "SKILL.md"


@pytest.mark.parametrize("skill_id", ["missing", "", "..", "../bundled", "a/b"])
def test_unknown_skill_raises(repository: SkillRepository, skill_id: str) -> None:
    with pytest.raises(SkillNotFoundError) as exc_info:
        repository.get_skill(skill_id)

    assert exc_info.value.skill_id == skill_id
    assert repository.has_skill(skill_id) is False


def test_directory_without_skill_md_is_not_a_skill(repository: SkillRepository, skills_root: Path) -> None:
    (skills_root / "empty").mkdir()

    assert "empty" not in repository.skill_ids()
    assert repository.has_skill("empty") is False


def test_missing_root_lists_nothing(tmp_path: Path) -> None:
    assert SkillRepository(tmp_path / "missing").list_skills() == []


def test_read_frontmatter_handles_malformed_yaml(tmp_path: Path, caplog) -> None:
    path = tmp_path / "SKILL.md"
    path.write_text("---\nname: [unterminated\n---\nBody\n", encoding="utf-8")

    assert read_frontmatter(path) == {}
    assert "Malformed YAML frontmatter" in caplog.text


def test_read_frontmatter_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "SKILL.md"
    path.write_text("\ufeff---\nname: demo\n---\n", encoding="utf-8")

    assert read_frontmatter(path) == {"name": "demo"}


def test_bundled_skills_match_catalog() -> None:
    repository = SkillRepository()
    summaries = repository.list_skills()

    assert [skill.id for skill in summaries] == [skill_id for skill_id, _ in SKILL_CATALOG]
    for summary in summaries:
        frontmatter = read_frontmatter(summary.path)
        assert frontmatter["name"] == summary.id
        assert summary.description == dict(SKILL_CATALOG)[summary.id]
    assert repository.root == get_skills_path()
