"""Project metadata collected for editor sessions."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from convex_skills.constants.context import DEFAULT_PROJECT_NAME, ENV_LOCAL_FILENAME, PACKAGE_JSON_FILENAME
from convex_skills.constants.watch import CONVEX_DIRNAME, SCHEMA_FILENAME
from convex_skills.context.functions import scan_functions
from convex_skills.context.schema import extract_table_names, schema_hash
from convex_skills.exceptions import ConfigParseError
from convex_skills.model import ConvexContext

logger = logging.getLogger(__name__)


def is_convex_project(directory: Path) -> bool:
    """Return True when *directory* has a ``convex/`` subdirectory."""
    return (directory / CONVEX_DIRNAME).is_dir()


def load_package_json(directory: Path) -> dict[str, object] | None:
    """Parse ``package.json`` in *directory*.

    Returns None when the file is absent.

    Raises:
        ConfigParseError: If the file is unreadable, not JSON, or not an object.
    """
    path = directory / PACKAGE_JSON_FILENAME
    if not path.is_file():
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigParseError(f"Invalid {PACKAGE_JSON_FILENAME} at {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigParseError(f"{PACKAGE_JSON_FILENAME} at {path} must be a JSON object")
    return payload


def read_project_name(directory: Path) -> str:
    """Return the ``name`` from package.json, or the default project name."""
    try:
        package = load_package_json(directory)
    except ConfigParseError as exc:
        logger.debug("Falling back to default project name: %s", exc)
        return DEFAULT_PROJECT_NAME
    if package is None:
        return DEFAULT_PROJECT_NAME
    name = package.get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return DEFAULT_PROJECT_NAME


def read_env_var_names(directory: Path) -> list[str]:
    """Return variable names (never values) declared in ``.env.local``."""
    path = directory / ENV_LOCAL_FILENAME
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return []

    names: list[str] = []
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        name = stripped.split("=", 1)[0].strip()
        if name:
            names.append(name)
    return names


def get_deployment_context(directory: Path, *, schema_filename: str = SCHEMA_FILENAME) -> ConvexContext | None:
    """Collect the context of the Convex project at *directory*.

    Returns None when *directory* is not a Convex project.
    """
    if not is_convex_project(directory):
        return None

    schema_path = directory / CONVEX_DIRNAME / schema_filename
    schema_source: str | None = None
    if schema_path.is_file():
        try:
            schema_source = schema_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", schema_path, exc)

    return ConvexContext(
        project_name=read_project_name(directory),
        tables=tuple(extract_table_names(schema_source)) if schema_source is not None else (),
        functions=tuple(scan_functions(directory / CONVEX_DIRNAME, schema_filename=schema_filename)),
        env_vars=tuple(read_env_var_names(directory)),
        schema_hash=schema_hash(schema_source) if schema_source is not None else None,
    )
