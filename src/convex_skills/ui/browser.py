"""State for a list of skills navigated with single-key commands.

The browser holds no I/O: a front end feeds it keys and renders
:meth:`SkillBrowser.render`. Opening a skill is delegated to ``on_open``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from convex_skills.constants.skills import SKILL_MARKDOWN_FILENAME
from convex_skills.constants.ui import (
    KEY_CANCEL,
    KEY_DOWN,
    KEY_OPEN,
    KEY_SEARCH,
    KEY_UP,
    SELECTED_MARKER,
    SKILLS_BASE_PATH,
    UNSELECTED_MARKER,
)
from convex_skills.model import SkillSummary


def skill_document_url(skill_id: str) -> str:
    """Return the document URL a browser front end opens for *skill_id*."""
    return f"{SKILLS_BASE_PATH}{skill_id}/{SKILL_MARKDOWN_FILENAME}"


def _matches(skill: SkillSummary, query: str) -> bool:
    query = query.lower()
    return query in skill.name.lower() or query in skill.description.lower() or query in skill.id.lower()


class SkillBrowser:
    """Selection, search and open behaviour over a fixed list of skills."""

    def __init__(self, skills: Sequence[SkillSummary], on_open: Callable[[SkillSummary], Any]) -> None:
        self._skills = tuple(skills)
        self._on_open = on_open
        self._selected = 0
        self._search_mode = False
        self._query = ""

    @property
    def skills(self) -> tuple[SkillSummary, ...]:
        return self._skills

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected(self) -> SkillSummary | None:
        if not self._skills:
            return None
        return self._skills[self._selected]

    @property
    def search_mode(self) -> bool:
        return self._search_mode

    @property
    def query(self) -> str:
        return self._query

    def visible(self) -> list[SkillSummary]:
        """Skills matching the current search query (all of them outside search)."""
        if not self._query:
            return list(self._skills)
        return [skill for skill in self._skills if _matches(skill, self._query)]

    def handle_key(self, key: str) -> bool:
        """Apply one key command. Returns True when the key was recognised."""
        if self._search_mode:
            if key in KEY_CANCEL:
                self.close_search()
                return True
            if key in KEY_OPEN:
                self.open_selected()
                self.close_search()
                return True
            return False

        if key in KEY_DOWN:
            self.move_down()
        elif key in KEY_UP:
            self.move_up()
        elif key in KEY_OPEN:
            self.open_selected()
        elif key in KEY_SEARCH:
            self.open_search()
        elif key in KEY_CANCEL:
            self.close_search()
        else:
            return False
        return True

    def move_down(self) -> None:
        if self._selected < len(self._skills) - 1:
            self._selected += 1

    def move_up(self) -> None:
        if self._selected > 0:
            self._selected -= 1

    def open_selected(self) -> SkillSummary | None:
        skill = self.selected
        if skill is not None:
            self._on_open(skill)
        return skill

    def open_search(self) -> None:
        self._search_mode = True

    def close_search(self) -> None:
        self._search_mode = False
        self._query = ""

    def search(self, query: str) -> None:
        """Filter by *query* and move the selection to the first match, if any."""
        self._query = query
        for index, skill in enumerate(self._skills):
            if _matches(skill, query):
                self._selected = index
                return

    def render(self) -> list[str]:
        """Render visible skills, one per line, marking the selection."""
        lines: list[str] = []
        visible_ids = {skill.id for skill in self.visible()}
        for index, skill in enumerate(self._skills):
            if skill.id not in visible_ids:
                continue
            marker = SELECTED_MARKER if index == self._selected else UNSELECTED_MARKER
            lines.append(f"{marker} {skill.name} - {skill.description}")
        if self._search_mode:
            lines.append(f"/{self._query}")
        return lines
