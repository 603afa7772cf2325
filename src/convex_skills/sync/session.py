"""Sync session for one Convex project.

A session watches ``<project>/convex`` and reacts to settled changes, and
implements the editor hooks (file edited, tool guard) for that project.
The default reactions only log; schema pushes and validation belong to
callers that pass their own handlers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

from convex_skills.config import SkillsConfig
from convex_skills.constants.opencode import EDIT_TOOL_NAMES
from convex_skills.context import get_deployment_context
from convex_skills.exceptions import GeneratedFileEditError, WatchTargetUnavailableError
from convex_skills.model import ConvexContext, SettledChange
from convex_skills.sync.reminders import ReminderGate
from convex_skills.types import ChangeKind
from convex_skills.watch import WatchHandle, classify_change, make_exclusion, start_watching

logger = logging.getLogger(__name__)

ChangeHandler: TypeAlias = Callable[[str], Any]


class SyncSession:
    """Owns one watch session and the editor-hook state for a project directory."""

    def __init__(
        self,
        project_dir: Path,
        config: SkillsConfig | None = None,
        *,
        on_schema_change: ChangeHandler | None = None,
        on_generic_change: ChangeHandler | None = None,
        on_error: Callable[[WatchTargetUnavailableError], Any] | None = None,
        reminders: ReminderGate | None = None,
        watch_factory: Callable[..., WatchHandle] = start_watching,
    ) -> None:
        self.project_dir = project_dir
        self.config = config if config is not None else SkillsConfig()
        self._on_schema_change = on_schema_change or self._log_schema_change
        self._on_generic_change = on_generic_change or self._log_generic_change
        self._on_error = on_error
        self.reminders = reminders if reminders is not None else ReminderGate(self.config.reminder_cooldown_s)
        self._watch_factory = watch_factory
        self._exclude = make_exclusion(self.config.watch.exclude_segment)
        self._handle: WatchHandle | None = None
        self._history: list[SettledChange] = []
        self._lock = threading.Lock()

    @property
    def watch_dir(self) -> Path:
        return self.project_dir / self.config.watch.directory

    @property
    def handle(self) -> WatchHandle | None:
        return self._handle

    @property
    def history(self) -> tuple[SettledChange, ...]:
        """Settled changes dispatched so far, oldest first."""
        with self._lock:
            return tuple(self._history)

    def context(self) -> ConvexContext | None:
        """Deployment context for the project, or None outside a Convex project."""
        return get_deployment_context(self.project_dir, schema_filename=self.config.watch.schema_filename)

    def start(self) -> bool:
        """Start watching the Convex directory. Returns False when it does not exist."""
        if self._handle is not None and self._handle.is_running:
            return True
        if not self.watch_dir.is_dir():
            logger.info("No %s/ directory found in %s", self.config.watch.directory, self.project_dir)
            return False
        self._handle = self._watch_factory(
            self.watch_dir,
            self._exclude,
            self.config.watch.quiet_period,
            self._dispatch,
            schema_filename=self.config.watch.schema_filename,
            on_error=self._handle_watch_error,
        )
        return True

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.stop()

    def check_watch(self) -> bool:
        """Return True while the watch is running and its directory still exists."""
        return self._handle is not None and self._handle.check_root()

    def _dispatch(self, path: str, kind: ChangeKind) -> None:
        with self._lock:
            self._history.append(SettledChange(path=path, kind=kind))
        if kind == "schema":
            self._on_schema_change(path)
        else:
            self._on_generic_change(path)

    def _handle_watch_error(self, error: WatchTargetUnavailableError) -> None:
        logger.error("%s", error)
        if self._on_error is not None:
            self._on_error(error)

    def _log_schema_change(self, path: str) -> None:
        logger.info("Schema changed (%s), push required", path)

    def _log_generic_change(self, path: str) -> None:
        logger.info("Function changed: %s", path)

    def _relative_to_convex(self, path: str) -> str | None:
        """Return *path* relative to the watched directory, or None when outside it."""
        normalized = path.replace("\\", "/")
        marker = f"{self.config.watch.directory}/"
        if normalized.startswith(marker):
            return normalized[len(marker) :]
        index = normalized.find(f"/{marker}")
        if index == -1:
            return None
        return normalized[index + len(marker) + 1 :]

    def file_edited(self, path: str) -> ChangeKind | None:
        """React to an editor's file-edited notification.

        Returns the change kind for edits inside the Convex directory, or None
        for edits that are ignored (outside it, or generated output).
        """
        relative = self._relative_to_convex(path)
        if relative is None:
            return None
        if self._exclude(relative):
            logger.warning("%s is auto-generated and should not be edited", path)
            return None

        kind = classify_change(relative, self.config.watch.schema_filename)
        if kind == "schema":
            logger.info("Schema changed, triggering push: %s", path)
        elif self.reminders.allow():
            logger.info("Convex file edited: %s", path)
        return kind

    def guard_tool_edit(self, tool: str, path: str | None) -> None:
        """Reject editor tool calls that would modify generated output.

        Raises:
            GeneratedFileEditError: If *tool* edits a file under the generated directory.
        """
        if tool not in EDIT_TOOL_NAMES or not path:
            return
        relative = self._relative_to_convex(path)
        if relative is not None and self._exclude(relative):
            raise GeneratedFileEditError(path)
