"""Key bindings and rendering for the skill browser."""

from __future__ import annotations

SKILLS_BASE_PATH: str = "/skills/"

KEY_DOWN: frozenset[str] = frozenset({"j", "down"})
KEY_UP: frozenset[str] = frozenset({"k", "up"})
KEY_OPEN: frozenset[str] = frozenset({"enter"})
KEY_SEARCH: frozenset[str] = frozenset({"/"})
KEY_CANCEL: frozenset[str] = frozenset({"escape", "esc"})
KEY_QUIT: frozenset[str] = frozenset({"q"})

SELECTED_MARKER: str = ">"
UNSELECTED_MARKER: str = " "
