"""Recursive directory watcher feeding a :class:`ChangeDebouncer`."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import TypeAlias

from watchdog.events import (
    EVENT_TYPE_CLOSED,
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from convex_skills.constants.watch import (
    SCHEMA_FILENAME,
    WATCH_STATE_DISPATCHING,
    WATCH_STATE_IDLE,
    WATCH_STATE_STOPPED,
    WATCH_STATE_WATCHING,
)
from convex_skills.exceptions import WatchTargetUnavailableError
from convex_skills.model import ChangeEvent
from convex_skills.types import RawEventKind, WatchState
from convex_skills.watch.debouncer import ChangeDebouncer, ExcludePredicate, SettledCallback, TimerFactory

logger = logging.getLogger(__name__)

ErrorCallback: TypeAlias = Callable[[WatchTargetUnavailableError], object]

_RAW_EVENT_KINDS: dict[str, RawEventKind] = {
    EVENT_TYPE_CREATED: "created",
    EVENT_TYPE_MODIFIED: "modified",
    EVENT_TYPE_CLOSED: "modified",
    EVENT_TYPE_DELETED: "deleted",
    EVENT_TYPE_MOVED: "moved",
}
_ROOT_LOSS_EVENTS: frozenset[str] = frozenset({EVENT_TYPE_DELETED, EVENT_TYPE_MOVED})


class _ChangeHandler(FileSystemEventHandler):
    """Forward raw watchdog events to the owning :class:`WatchHandle`."""

    def __init__(self, handle: WatchHandle) -> None:
        super().__init__()
        self._handle = handle

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._handle.handle_event(event)


class WatchHandle:
    """A running watch session over one root directory.

    ``stop()`` is idempotent and safe to call from any thread, including
    from inside the settled callback.
    """

    def __init__(
        self,
        root: Path,
        debouncer: ChangeDebouncer,
        *,
        on_error: ErrorCallback | None = None,
        observer_factory: Callable[[], BaseObserver] = Observer,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._root = root
        self._debouncer = debouncer
        self._on_error = on_error
        self._observer_factory = observer_factory
        self._clock = clock
        self._observer: BaseObserver | None = None
        self._lock = threading.Lock()
        self._started = False
        self._stopped = False

    @property
    def root(self) -> Path:
        return self._root

    @property
    def debouncer(self) -> ChangeDebouncer:
        return self._debouncer

    @property
    def state(self) -> WatchState:
        with self._lock:
            if self._stopped:
                return WATCH_STATE_STOPPED
            if not self._started:
                return WATCH_STATE_IDLE
        if self._debouncer.dispatching:
            return WATCH_STATE_DISPATCHING
        return WATCH_STATE_WATCHING

    @property
    def is_running(self) -> bool:
        return self.state in (WATCH_STATE_WATCHING, WATCH_STATE_DISPATCHING)

    def start(self) -> None:
        """Subscribe to filesystem notifications under the root."""
        with self._lock:
            if self._started or self._stopped:
                return
            if not self._root.is_dir():
                self._stopped = True
                raise WatchTargetUnavailableError(self._root)
            observer = self._observer_factory()
            observer.schedule(_ChangeHandler(self), str(self._root), recursive=True)
            observer.daemon = True
            try:
                observer.start()
            except OSError as exc:
                self._stopped = True
                raise WatchTargetUnavailableError(self._root, str(exc)) from exc
            self._observer = observer
            self._started = True
        logger.info("Watching %s", self._root)

    def stop(self) -> None:
        """Cancel any pending dispatch and release the filesystem subscription."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            observer = self._observer
            self._observer = None
        self._debouncer.close()
        if observer is not None:
            _release_observer(observer)
        logger.info("Stopped watching %s", self._root)

    def handle_event(self, event: FileSystemEvent) -> None:
        """Translate one raw notification and submit it to the debouncer."""
        with self._lock:
            if self._stopped:
                return

        if self._is_root_loss(event):
            self._fail(WatchTargetUnavailableError(self._root, "directory was removed"))
            return

        change = self._to_change_event(event)
        if change is not None:
            self._debouncer.submit(change)

    def check_root(self) -> bool:
        """Report root loss if the root is no longer a directory.

        Renaming the root emits no notification under inotify, so callers
        that need prompt detection poll this. Returns False once stopped.
        """
        with self._lock:
            if self._stopped:
                return False
        if self._root.is_dir():
            return True
        self._fail(WatchTargetUnavailableError(self._root, "directory was removed or renamed"))
        return False

    def _is_root_loss(self, event: FileSystemEvent) -> bool:
        if event.event_type in _ROOT_LOSS_EVENTS and _event_path(event.src_path) == self._root:
            return True
        return not self._root.is_dir()

    def _to_change_event(self, event: FileSystemEvent) -> ChangeEvent | None:
        if event.is_directory:
            return None
        kind = _RAW_EVENT_KINDS.get(event.event_type)
        if kind is None:
            return None
        raw_path = event.dest_path if kind == "moved" and event.dest_path else event.src_path
        try:
            relative = _event_path(raw_path).relative_to(self._root)
        except (ValueError, UnicodeDecodeError):
            logger.debug("Skipping notification outside %s: %r", self._root, raw_path)
            return None
        if not relative.parts:
            return None
        return ChangeEvent(path=relative.as_posix(), kind=kind, timestamp=self._clock())

    def _fail(self, error: WatchTargetUnavailableError) -> None:
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            observer = self._observer
            self._observer = None
        self._debouncer.close()
        if observer is not None:
            _release_observer(observer)
        if self._on_error is None:
            logger.error("%s", error)
        else:
            self._on_error(error)

    def __enter__(self) -> WatchHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


def _event_path(raw: str | bytes) -> Path:
    return Path(os.fsdecode(raw))


def _release_observer(observer: BaseObserver) -> None:
    observer.stop()
    # Root-loss teardown runs on the observer's own thread, which cannot join itself.
    if observer.is_alive() and threading.current_thread() is not observer:
        observer.join()


def start_watching(
    root: Path,
    exclude: ExcludePredicate | None,
    quiet_period: float,
    on_settled: SettledCallback,
    *,
    schema_filename: str = SCHEMA_FILENAME,
    on_error: ErrorCallback | None = None,
    observer_factory: Callable[[], BaseObserver] = Observer,
    timer_factory: TimerFactory = threading.Timer,
) -> WatchHandle:
    """Watch *root* recursively and call ``on_settled(path, kind)`` once per quiet period.

    Args:
        root: Existing directory to watch.
        exclude: Predicate over root-relative POSIX paths; matching
            notifications are discarded without touching the countdown.
        quiet_period: Seconds of inactivity before the last path is dispatched.
        on_settled: Called with the last non-excluded path and its kind
            (``"schema"`` or ``"generic"``). Runs on a timer thread.
        schema_filename: Exact base name that classifies a change as schema-kind.
        on_error: Called once if the root disappears; the watch then stops.

    Raises:
        WatchTargetUnavailableError: If *root* is not an existing directory.
        ValueError: If *quiet_period* is not positive.
    """
    root = Path(root)
    if not root.is_dir():
        raise WatchTargetUnavailableError(root)
    debouncer = ChangeDebouncer(
        quiet_period,
        on_settled,
        schema_filename=schema_filename,
        exclude=exclude,
        timer_factory=timer_factory,
    )
    handle = WatchHandle(root.resolve(), debouncer, on_error=on_error, observer_factory=observer_factory)
    handle.start()
    return handle
