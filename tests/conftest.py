"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from convex_skills.skills import SkillRepository


class ManualTimer:
    """Stand-in for ``threading.Timer`` that only runs when the test fires it."""

    def __init__(self, interval: float, function: Callable[[], None]) -> None:
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if self.started and not self.cancelled:
            self.function()


class ManualTimerFactory:
    """Records every timer the debouncer creates."""

    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def __call__(self, interval: float, function: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[ManualTimer]:
        return [timer for timer in self.timers if timer.started and not timer.cancelled]

    def expire(self) -> None:
        """Fire every timer that is still pending."""
        for timer in self.active:
            timer.fire()


class FakeObserver:
    """Observer double that records scheduling without touching the filesystem."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[object, str, bool]] = []
        self.daemon = False
        self.started = False
        self.stopped = False
        self.joined = False

    def schedule(self, handler: object, path: str, recursive: bool = False) -> None:
        self.scheduled.append((handler, path, recursive))

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def join(self, timeout: float | None = None) -> None:
        self.joined = True

    def is_alive(self) -> bool:
        return self.started and not self.stopped


@pytest.fixture
def timers() -> ManualTimerFactory:
    return ManualTimerFactory()


@pytest.fixture
def observers() -> list[FakeObserver]:
    """Observers created through :func:`observer_factory`, in creation order."""
    return []


@pytest.fixture
def observer_factory(observers: list[FakeObserver]) -> Callable[[], FakeObserver]:
    def _factory() -> FakeObserver:
        observer = FakeObserver()
        observers.append(observer)
        return observer

    return _factory


def write_skill(root: Path, skill_id: str, description: str | None = None, body: str = "Body.\n") -> Path:
    """Write ``<root>/<skill_id>/SKILL.md`` with optional frontmatter."""
    path = root / skill_id / "SKILL.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    if description is None:
        path.write_text(body, encoding="utf-8")
    else:
        path.write_text(f"---\nname: {skill_id}\ndescription: {description}\n---\n\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """A small skills directory with two catalog skills and one extra."""
    root = tmp_path / "bundled" / "skills"
    write_skill(root, "convex-functions", "Writing functions")
    write_skill(root, "convex-best-practices", "Best practices")
    write_skill(root, "zz-custom", None)
    return root


@pytest.fixture
def repository(skills_root: Path) -> SkillRepository:
    return SkillRepository(skills_root)


@pytest.fixture
def convex_project(tmp_path: Path) -> Path:
    """A minimal Convex project with schema, functions and env file."""
    project = tmp_path / "app"
    convex = project / "convex"
    (convex / "_generated").mkdir(parents=True)
    (project / "package.json").write_text('{"name": "chat-app", "version": "1.0.0"}', encoding="utf-8")
    (project / ".env.local").write_text(
        "# deployment\nCONVEX_DEPLOYMENT=dev:happy-otter-123\n\nVITE_CONVEX_URL=https://example.convex.cloud\n",
        encoding="utf-8",
    )
    (convex / "schema.ts").write_text(
        "export default defineSchema({\n"
        "  users: defineTable({ name: v.string() }),\n"
        "  messages: defineTable({ body: v.string() }).index(\"by_author\", [\"author\"]),\n"
        "});\n",
        encoding="utf-8",
    )
    (convex / "messages.ts").write_text(
        "export const list = query({ args: {}, handler: async (ctx) => [] });\n"
        "export const send = mutation({ args: {}, handler: async (ctx) => {} });\n"
        "export const purge = internalMutation({ args: {}, handler: async (ctx) => {} });\n",
        encoding="utf-8",
    )
    (convex / "_generated" / "api.ts").write_text("export const api = query({});\n", encoding="utf-8")
    return project


@pytest.fixture
def make_skill() -> Callable[..., Path]:
    return write_skill
