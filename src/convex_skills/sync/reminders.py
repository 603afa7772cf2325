"""Cooldown gate for edit reminders."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from convex_skills.constants.watch import DEFAULT_REMINDER_COOLDOWN_S


class ReminderGate:
    """Allow at most one reminder per cooldown window.

    Each session owns its own gate so reminders for one project never
    suppress reminders for another.
    """

    def __init__(
        self,
        cooldown: float = DEFAULT_REMINDER_COOLDOWN_S,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if cooldown <= 0:
            raise ValueError(f"cooldown must be positive, got {cooldown!r}")
        self._cooldown = cooldown
        self._clock = clock
        self._last: float | None = None
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Return True and start a new window if the previous one has elapsed."""
        with self._lock:
            now = self._clock()
            if self._last is not None and now - self._last <= self._cooldown:
                return False
            self._last = now
            return True

    def reset(self) -> None:
        with self._lock:
            self._last = None
