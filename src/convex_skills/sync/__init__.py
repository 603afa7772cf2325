"""Per-project sync sessions: watcher ownership and editor hooks."""

from .reminders import ReminderGate
from .session import SyncSession

__all__ = ["ReminderGate", "SyncSession"]
