"""Trailing-edge debouncer that collapses bursts of change events into one dispatch.

All pending state (the last path, the accumulated batch and the timer) is
guarded by a single lock. Each submission bumps a generation counter; a
timer only dispatches when its generation is still current, which resolves
the race between a timer expiring and a new event resetting it.

Handlers run on the timer thread. A second, re-entrant lock is held for the
duration of a dispatch so that ``close()`` can wait for an in-flight handler
and guarantee that nothing is dispatched once it returns. Submissions never
wait on that lock, so a slow handler does not block incoming events.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from functools import partial
from typing import Any, Protocol, TypeAlias

from convex_skills.constants.watch import SCHEMA_FILENAME
from convex_skills.model import ChangeEvent
from convex_skills.types import ChangeKind
from convex_skills.watch.classify import classify_change

logger = logging.getLogger(__name__)

SettledCallback: TypeAlias = Callable[[str, ChangeKind], Any]
ExcludePredicate: TypeAlias = Callable[[str], bool]


class TimerLike(Protocol):
    """Subset of :class:`threading.Timer` the debouncer relies on."""

    daemon: bool

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory: TypeAlias = Callable[[float, Callable[[], None]], TimerLike]


class ChangeDebouncer:
    """Collapse change events arriving within ``quiet_period`` seconds into a single callback."""

    def __init__(
        self,
        quiet_period: float,
        on_settled: SettledCallback,
        *,
        schema_filename: str = SCHEMA_FILENAME,
        exclude: ExcludePredicate | None = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        if quiet_period <= 0:
            raise ValueError(f"quiet_period must be positive, got {quiet_period!r}")
        self._quiet_period = quiet_period
        self._on_settled = on_settled
        self._schema_filename = schema_filename
        self._exclude = exclude
        self._timer_factory = timer_factory

        self._lock = threading.Lock()
        self._dispatch_lock = threading.RLock()
        self._timer: TimerLike | None = None
        self._pending: ChangeEvent | None = None
        self._batch: list[ChangeEvent] = []
        self._generation = 0
        self._dispatching = False
        self._closed = False

    @property
    def quiet_period(self) -> float:
        return self._quiet_period

    @property
    def pending(self) -> ChangeEvent | None:
        """Most recent non-excluded event awaiting dispatch."""
        with self._lock:
            return self._pending

    @property
    def batch(self) -> tuple[ChangeEvent, ...]:
        """All events accumulated since the last dispatch."""
        with self._lock:
            return tuple(self._batch)

    @property
    def dispatching(self) -> bool:
        with self._lock:
            return self._dispatching

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def excludes(self, path: str) -> bool:
        return self._exclude is not None and self._exclude(path)

    def submit(self, event: ChangeEvent) -> bool:
        """Record *event* and restart the countdown.

        Returns False when the event was dropped, either because it matched the
        exclusion predicate or because the debouncer is closed.
        """
        if self.excludes(event.path):
            logger.debug("Ignoring excluded change: %s", event.path)
            return False

        with self._lock:
            if self._closed:
                return False
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = event
            self._batch.append(event)
            timer = self._timer_factory(self._quiet_period, partial(self._fire, self._generation))
            timer.daemon = True
            self._timer = timer
            timer.start()
        return True

    def cancel(self) -> None:
        """Drop the pending batch without dispatching it."""
        with self._lock:
            self._clear_pending()
            self._generation += 1

    def close(self) -> None:
        """Cancel any countdown and wait for an in-flight dispatch to finish.

        Idempotent. No callback is invoked after this returns.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._clear_pending()
            self._generation += 1
        with self._dispatch_lock:
            pass

    def _clear_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._pending = None
        self._batch = []

    def _fire(self, generation: int) -> None:
        with self._dispatch_lock:
            with self._lock:
                if self._closed or generation != self._generation or self._pending is None:
                    return
                event = self._pending
                batch_size = len(self._batch)
                self._timer = None
                self._pending = None
                self._batch = []
                self._dispatching = True

            kind = classify_change(event.path, self._schema_filename)
            logger.debug("Settled %s change after %d event(s): %s", kind, batch_size, event.path)
            try:
                self._on_settled(event.path, kind)
            except Exception:
                logger.exception("Change handler failed for %s", event.path)
            finally:
                with self._lock:
                    self._dispatching = False
