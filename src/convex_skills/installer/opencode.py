"""Install and remove the OpenCode agent/command templates in a project."""

from __future__ import annotations

import logging
from pathlib import Path

from convex_skills.constants.opencode import (
    GITIGNORE_BLOCK,
    GITIGNORE_FILENAME,
    GITIGNORE_MARKER,
    OPENCODE_AGENT_FILES,
    OPENCODE_AGENTS_DIRNAME,
    OPENCODE_COMMAND_FILES,
    OPENCODE_COMMANDS_DIRNAME,
    OPENCODE_CONFIG_FILENAME,
    OPENCODE_DIRNAME,
)
from convex_skills.constants.skills import DATA_ROOT, OPENCODE_TEMPLATE_DIRNAME
from convex_skills.io import copy_file, ensure_dir
from convex_skills.model import InstallResult
from convex_skills.types import InstallAction

logger = logging.getLogger(__name__)


def get_opencode_template_path() -> Path:
    """Return the directory holding bundled OpenCode templates."""
    return DATA_ROOT / OPENCODE_TEMPLATE_DIRNAME


def install_opencode(
    project_dir: Path,
    *,
    force: bool = False,
    skip_config: bool = False,
    template_dir: Path | None = None,
) -> list[InstallResult]:
    """Install OpenCode config, agents and commands into *project_dir*.

    Nothing is changed when ``opencode.json`` already exists and *force* is
    not set; a single ``skipped`` result is returned instead.
    """
    template_dir = template_dir if template_dir is not None else get_opencode_template_path()
    config_path = project_dir / OPENCODE_CONFIG_FILENAME
    if config_path.exists() and not force:
        return [
            InstallResult(
                name=OPENCODE_CONFIG_FILENAME,
                destination=config_path,
                action="skipped",
                reason="already exists, use --force to overwrite",
            )
        ]

    results: list[InstallResult] = []
    agents_dir = project_dir / OPENCODE_DIRNAME / OPENCODE_AGENTS_DIRNAME
    commands_dir = project_dir / OPENCODE_DIRNAME / OPENCODE_COMMANDS_DIRNAME
    for directory in (agents_dir, commands_dir):
        if ensure_dir(directory):
            results.append(_result(f"{OPENCODE_DIRNAME}/{directory.name}/", directory, "created"))

    if not skip_config:
        source = template_dir / OPENCODE_CONFIG_FILENAME
        if source.is_file():
            copy_file(source, config_path)
            results.append(_result(OPENCODE_CONFIG_FILENAME, config_path, "created"))

    for subdir, names, destination_dir in (
        (OPENCODE_AGENTS_DIRNAME, OPENCODE_AGENT_FILES, agents_dir),
        (OPENCODE_COMMANDS_DIRNAME, OPENCODE_COMMAND_FILES, commands_dir),
    ):
        for name in names:
            source = template_dir / subdir / name
            if not source.is_file():
                logger.warning("Missing OpenCode template: %s", source)
                continue
            destination = destination_dir / name
            copy_file(source, destination)
            results.append(_result(f"{OPENCODE_DIRNAME}/{subdir}/{name}", destination, "created"))

    gitignore = _update_gitignore(project_dir)
    if gitignore is not None:
        results.append(gitignore)
    return results


def uninstall_opencode(project_dir: Path) -> list[InstallResult]:
    """Remove installed agent and command templates. ``opencode.json`` is left in place."""
    results: list[InstallResult] = []
    for subdir, names in (
        (OPENCODE_AGENTS_DIRNAME, OPENCODE_AGENT_FILES),
        (OPENCODE_COMMANDS_DIRNAME, OPENCODE_COMMAND_FILES),
    ):
        for name in names:
            path = project_dir / OPENCODE_DIRNAME / subdir / name
            if path.is_file():
                path.unlink()
                results.append(_result(f"{OPENCODE_DIRNAME}/{subdir}/{name}", path, "removed"))
    return results


def _update_gitignore(project_dir: Path) -> InstallResult | None:
    """Append the ``.opencode/`` ignore block to an existing .gitignore once."""
    path = project_dir / GITIGNORE_FILENAME
    if not path.is_file():
        return None
    content = path.read_text(encoding="utf-8")
    if GITIGNORE_MARKER in content:
        return None
    path.write_text(content + GITIGNORE_BLOCK, encoding="utf-8")
    return InstallResult(name=GITIGNORE_FILENAME, destination=path, action="updated")


def _result(name: str, destination: Path, action: InstallAction) -> InstallResult:
    return InstallResult(name=name, destination=destination, action=action)
