"""Tests for JSON Schema validation of the deployment context payload."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from convex_skills.cli.main import main
from convex_skills.context import get_deployment_context
from convex_skills.model import ConvexContext

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
CONTEXT_SCHEMA_PATH: Path = SCHEMAS_DIR / "context.schema.json"


def _load_schema(path: Path) -> dict[str, Any]:
    """Load a JSON Schema file from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def test_context_schema_is_valid_draft() -> None:
    jsonschema.Draft202012Validator.check_schema(_load_schema(CONTEXT_SCHEMA_PATH))


def test_project_context_matches_schema(convex_project: Path) -> None:
    context = get_deployment_context(convex_project)
    assert context is not None

    jsonschema.validate(context.to_dict(), _load_schema(CONTEXT_SCHEMA_PATH))


def test_minimal_context_matches_schema() -> None:
    jsonschema.validate(ConvexContext(project_name="convex-project").to_dict(), _load_schema(CONTEXT_SCHEMA_PATH))


def test_context_file_written_by_cli_matches_schema(convex_project: Path, tmp_path: Path) -> None:
    output = tmp_path / "context.json"

    assert main(["context", "--dir", str(convex_project), "--output", str(output)]) == 0

    jsonschema.validate(json.loads(output.read_text(encoding="utf-8")), _load_schema(CONTEXT_SCHEMA_PATH))


def test_schema_rejects_unknown_function_type() -> None:
    payload = {
        "projectName": "app",
        "tables": [],
        "functions": [{"name": "x", "type": "internalQuery", "file": "x.ts", "args": []}],
        "envVars": [],
    }

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(payload, _load_schema(CONTEXT_SCHEMA_PATH))
