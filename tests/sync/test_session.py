"""Tests for per-project sync sessions and editor hooks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from convex_skills.config import SkillsConfig, WatchConfig
from convex_skills.exceptions import GeneratedFileEditError, WatchTargetUnavailableError
from convex_skills.model import SettledChange
from convex_skills.sync import ReminderGate, SyncSession


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeHandle:
    def __init__(self) -> None:
        self.is_running = True
        self.stopped = False
        self.root_present = True

    def stop(self) -> None:
        self.stopped = True
        self.is_running = False

    def check_root(self) -> bool:
        return self.is_running and self.root_present


class RecordingWatchFactory:
    """Captures the arguments a session passes to ``start_watching``."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        self.handles: list[FakeHandle] = []

    def __call__(self, *args: Any, **kwargs: Any) -> FakeHandle:
        self.calls.append((args, kwargs))
        handle = FakeHandle()
        self.handles.append(handle)
        return handle

    @property
    def on_settled(self):
        return self.calls[-1][0][3]

    @property
    def on_error(self):
        return self.calls[-1][1]["on_error"]


@pytest.fixture
def watch_factory() -> RecordingWatchFactory:
    return RecordingWatchFactory()


@pytest.fixture
def session(convex_project: Path, watch_factory: RecordingWatchFactory) -> SyncSession:
    return SyncSession(convex_project, watch_factory=watch_factory)


def test_reminder_gate_cooldown() -> None:
    clock = FakeClock()
    gate = ReminderGate(30.0, clock=clock)

    assert gate.allow() is True
    clock.now += 30.0
    assert gate.allow() is False
    clock.now += 0.5
    assert gate.allow() is True


def test_reminder_gate_reset() -> None:
    gate = ReminderGate(30.0, clock=FakeClock())

    assert gate.allow() is True
    gate.reset()
    assert gate.allow() is True


def test_reminder_gate_rejects_non_positive_cooldown() -> None:
    with pytest.raises(ValueError):
        ReminderGate(0)


def test_start_watches_convex_directory(
    session: SyncSession,
    convex_project: Path,
    watch_factory: RecordingWatchFactory,
) -> None:
    assert session.start() is True

    [(args, kwargs)] = watch_factory.calls
    root, exclude, quiet_period, _ = args
    assert root == convex_project / "convex"
    assert quiet_period == 1.0
    assert kwargs["schema_filename"] == "schema.ts"
    assert exclude("_generated/api.ts") is True
    assert exclude("messages.ts") is False


def test_start_is_idempotent_while_running(session: SyncSession, watch_factory: RecordingWatchFactory) -> None:
    session.start()
    session.start()

    assert len(watch_factory.calls) == 1


def test_start_without_convex_directory(tmp_path: Path, watch_factory: RecordingWatchFactory) -> None:
    session = SyncSession(tmp_path, watch_factory=watch_factory)

    assert session.start() is False
    assert watch_factory.calls == []
    assert session.handle is None


def test_custom_watch_config(convex_project: Path, watch_factory: RecordingWatchFactory) -> None:
    (convex_project / "backend").mkdir()
    config = SkillsConfig(watch=WatchConfig(directory="backend", quiet_period_ms=250, schema_filename="tables.ts"))
    session = SyncSession(convex_project, config, watch_factory=watch_factory)

    session.start()

    args, kwargs = watch_factory.calls[0]
    assert args[0] == convex_project / "backend"
    assert args[2] == 0.25
    assert kwargs["schema_filename"] == "tables.ts"


def test_settled_changes_route_by_kind(convex_project: Path, watch_factory: RecordingWatchFactory) -> None:
    schema_changes: list[str] = []
    generic_changes: list[str] = []
    session = SyncSession(
        convex_project,
        on_schema_change=schema_changes.append,
        on_generic_change=generic_changes.append,
        watch_factory=watch_factory,
    )
    session.start()

    watch_factory.on_settled("schema.ts", "schema")
    watch_factory.on_settled("messages.ts", "generic")

    assert schema_changes == ["schema.ts"]
    assert generic_changes == ["messages.ts"]
    assert session.history == (
        SettledChange(path="schema.ts", kind="schema"),
        SettledChange(path="messages.ts", kind="generic"),
    )


def test_watch_error_is_forwarded(convex_project: Path, watch_factory: RecordingWatchFactory) -> None:
    errors: list[WatchTargetUnavailableError] = []
    session = SyncSession(convex_project, on_error=errors.append, watch_factory=watch_factory)
    session.start()
    error = WatchTargetUnavailableError(convex_project / "convex", "directory was removed")

    watch_factory.on_error(error)

    assert errors == [error]


def test_stop_releases_handle(session: SyncSession, watch_factory: RecordingWatchFactory) -> None:
    session.start()
    session.stop()

    assert watch_factory.handles[0].stopped is True


def test_stop_before_start_is_a_no_op(session: SyncSession) -> None:
    session.stop()


def test_context_uses_project_directory(session: SyncSession) -> None:
    context = session.context()

    assert context is not None
    assert context.project_name == "chat-app"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        pytest.param("convex/schema.ts", "schema", id="schema"),
        pytest.param("/home/dev/app/convex/schema.ts", "schema", id="absolute-schema"),
        pytest.param("convex/messages.ts", "generic", id="function"),
        pytest.param("convex\\messages.ts", "generic", id="windows-separators"),
        pytest.param("src/App.tsx", None, id="outside-convex"),
        pytest.param("convex/_generated/api.ts", None, id="generated"),
    ],
)
def test_file_edited_classification(session: SyncSession, path: str, expected: str | None) -> None:
    assert session.file_edited(path) == expected


def test_file_edited_warns_about_generated_files(session: SyncSession, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="convex_skills.sync.session"):
        session.file_edited("convex/_generated/api.ts")

    assert "auto-generated" in caplog.text


def test_file_edited_reminders_respect_cooldown(convex_project: Path, caplog) -> None:
    clock = FakeClock()
    session = SyncSession(convex_project, reminders=ReminderGate(30.0, clock=clock))

    with caplog.at_level(logging.INFO, logger="convex_skills.sync.session"):
        session.file_edited("convex/messages.ts")
        session.file_edited("convex/messages.ts")
        clock.now += 31.0
        session.file_edited("convex/messages.ts")

    assert caplog.text.count("Convex file edited") == 2


def test_schema_edit_is_never_throttled(convex_project: Path, caplog) -> None:
    session = SyncSession(convex_project, reminders=ReminderGate(30.0, clock=FakeClock()))

    with caplog.at_level(logging.INFO, logger="convex_skills.sync.session"):
        for _ in range(3):
            session.file_edited("convex/schema.ts")

    assert caplog.text.count("triggering push") == 3


def test_guard_tool_edit_blocks_generated_files(session: SyncSession) -> None:
    with pytest.raises(GeneratedFileEditError, match="_generated/api.ts"):
        session.guard_tool_edit("edit_file", "convex/_generated/api.ts")


@pytest.mark.parametrize(
    ("tool", "path"),
    [
        pytest.param("edit_file", "convex/messages.ts", id="regular-file"),
        pytest.param("read_file", "convex/_generated/api.ts", id="read-only-tool"),
        pytest.param("write_file", None, id="no-path"),
    ],
)
def test_guard_tool_edit_allows(session: SyncSession, tool: str, path: str | None) -> None:
    session.guard_tool_edit(tool, path)


def test_check_watch_reflects_handle_liveness(session: SyncSession, watch_factory: RecordingWatchFactory) -> None:
    assert session.check_watch() is False

    session.start()
    assert session.check_watch() is True

    watch_factory.handles[0].root_present = False
    assert session.check_watch() is False
