"""Tests for the OpenCode plugin installer."""

from __future__ import annotations

import json
from pathlib import Path

from convex_skills.constants.opencode import OPENCODE_AGENT_FILES, OPENCODE_COMMAND_FILES
from convex_skills.installer import install_opencode, uninstall_opencode


def test_install_creates_config_agents_and_commands(tmp_path: Path) -> None:
    results = install_opencode(tmp_path)

    assert json.loads((tmp_path / "opencode.json").read_text(encoding="utf-8"))["plugin"] == ["convex-opencode"]
    for name in OPENCODE_AGENT_FILES:
        assert (tmp_path / ".opencode" / "agents" / name).is_file()
    for name in OPENCODE_COMMAND_FILES:
        assert (tmp_path / ".opencode" / "commands" / name).is_file()
    assert {result.action for result in results} == {"created"}


def test_existing_config_is_left_alone_without_force(tmp_path: Path) -> None:
    (tmp_path / "opencode.json").write_text("{}", encoding="utf-8")

    [result] = install_opencode(tmp_path)

    assert result.action == "skipped"
    assert "--force" in result.reason
    assert (tmp_path / "opencode.json").read_text(encoding="utf-8") == "{}"
    assert not (tmp_path / ".opencode").exists()


def test_force_overwrites_config(tmp_path: Path) -> None:
    (tmp_path / "opencode.json").write_text("{}", encoding="utf-8")

    install_opencode(tmp_path, force=True)

    assert (tmp_path / "opencode.json").read_text(encoding="utf-8") != "{}"


def test_skip_config_leaves_config_absent(tmp_path: Path) -> None:
    results = install_opencode(tmp_path, skip_config=True)

    assert not (tmp_path / "opencode.json").exists()
    assert "opencode.json" not in {result.name for result in results}
    assert (tmp_path / ".opencode" / "agents" / "convex-build.md").is_file()


def test_gitignore_updated_once(tmp_path: Path) -> None:
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("node_modules/\n", encoding="utf-8")

    install_opencode(tmp_path)
    install_opencode(tmp_path, force=True)

    content = gitignore.read_text(encoding="utf-8")
    assert content.count(".opencode/") == 1
    assert content.startswith("node_modules/\n")


def test_missing_gitignore_is_not_created(tmp_path: Path) -> None:
    install_opencode(tmp_path)

    assert not (tmp_path / ".gitignore").exists()


def test_missing_template_is_skipped(tmp_path: Path, caplog) -> None:
    template_dir = tmp_path / "template"
    (template_dir / "agents").mkdir(parents=True)
    (template_dir / "agents" / "convex-build.md").write_text("build", encoding="utf-8")
    project = tmp_path / "project"
    project.mkdir()

    results = install_opencode(project, template_dir=template_dir)

    assert (project / ".opencode" / "agents" / "convex-build.md").is_file()
    assert not (project / ".opencode" / "agents" / "convex-debug.md").exists()
    assert ".opencode/agents/convex-build.md" in {result.name for result in results}
    assert "Missing OpenCode template" in caplog.text


def test_uninstall_removes_templates_but_keeps_config(tmp_path: Path) -> None:
    install_opencode(tmp_path)

    results = uninstall_opencode(tmp_path)

    assert len(results) == len(OPENCODE_AGENT_FILES) + len(OPENCODE_COMMAND_FILES)
    assert all(result.action == "removed" for result in results)
    assert not any((tmp_path / ".opencode" / "agents").iterdir())
    assert (tmp_path / "opencode.json").is_file()


def test_uninstall_without_install_is_a_no_op(tmp_path: Path) -> None:
    assert uninstall_opencode(tmp_path) == []
