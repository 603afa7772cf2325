"""Dataclasses shared across the skill, installer, watcher and context modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from convex_skills.types import ChangeKind, InstallAction, JsonObject, RawEventKind


@dataclass(frozen=True)
class SkillSummary:
    """One bundled skill as shown by ``list`` and the browser."""

    id: str
    name: str
    description: str
    path: Path


@dataclass(frozen=True)
class InstallResult:
    """Outcome of copying, linking or skipping a single file."""

    name: str
    destination: Path
    action: InstallAction
    reason: str = ""


@dataclass(frozen=True)
class ChangeEvent:
    """A single filesystem notification relative to the watched root."""

    path: str
    kind: RawEventKind
    timestamp: float


@dataclass(frozen=True)
class SettledChange:
    """The path and classification handed to ``on_settled``."""

    path: str
    kind: ChangeKind


@dataclass(frozen=True)
class FunctionInfo:
    """A Convex function exported from a module under ``convex/``."""

    name: str
    type: Literal["query", "mutation", "action", "httpAction"]
    file: str
    args: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        return {"name": self.name, "type": self.type, "file": self.file, "args": list(self.args)}


@dataclass(frozen=True)
class ConvexContext:
    """Deployment context injected into editor sessions."""

    project_name: str
    tables: tuple[str, ...] = ()
    functions: tuple[FunctionInfo, ...] = ()
    env_vars: tuple[str, ...] = ()
    schema_hash: str | None = None

    def to_dict(self) -> JsonObject:
        """Serialize to the JSON payload printed by ``context --json``."""
        payload: JsonObject = {
            "projectName": self.project_name,
            "tables": list(self.tables),
            "functions": [fn.to_dict() for fn in self.functions],
            "envVars": list(self.env_vars),
        }
        if self.schema_hash is not None:
            payload["schemaHash"] = self.schema_hash
        return payload
