"""Tests for the line-based skill browser front end."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from convex_skills.cli.browse import run_browser
from convex_skills.model import SkillSummary
from convex_skills.ui import SkillBrowser


def _scripted(lines: Iterable[str]):
    queue = list(lines)

    def _read(prompt: str) -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return _read


def _browser(opened: list[str]) -> SkillBrowser:
    skills = [
        SkillSummary(id="convex-functions", name="Convex Functions", description="Queries", path=Path("a")),
        SkillSummary(id="convex-schema-validator", name="Convex Schema", description="Validators", path=Path("b")),
    ]
    return SkillBrowser(skills, on_open=lambda skill: opened.append(skill.id))


def test_empty_line_opens_selection() -> None:
    opened: list[str] = []
    output: list[str] = []

    run_browser(_browser(opened), read=_scripted(["j", "", "q"]), write=output.append)

    assert opened == ["convex-schema-validator"]


def test_search_line_becomes_query() -> None:
    opened: list[str] = []

    run_browser(_browser(opened), read=_scripted(["/", "validators", "", "q"]), write=lambda line: None)

    assert opened == ["convex-schema-validator"]


def test_q_in_search_mode_is_a_query() -> None:
    opened: list[str] = []
    browser = _browser(opened)

    run_browser(browser, read=_scripted(["/", "q"]), write=lambda line: None)

    assert browser.search_mode is True
    assert browser.query == "q"


def test_esc_leaves_search() -> None:
    browser = _browser([])

    run_browser(browser, read=_scripted(["/", "schema", "esc", "q"]), write=lambda line: None)

    assert browser.search_mode is False
    assert browser.query == ""


def test_unknown_key_is_reported() -> None:
    output: list[str] = []

    run_browser(_browser([]), read=_scripted(["x"]), write=output.append)

    assert "Unknown key: x" in output


def test_end_of_input_exits() -> None:
    output: list[str] = []

    run_browser(_browser([]), read=_scripted([]), write=output.append)

    assert output == ["> Convex Functions - Queries", "  Convex Schema - Validators"]
