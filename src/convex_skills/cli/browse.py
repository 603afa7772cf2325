"""Line-based front end for :class:`~convex_skills.ui.SkillBrowser`."""

from __future__ import annotations

from collections.abc import Callable

from convex_skills.constants.ui import KEY_QUIT
from convex_skills.ui import SkillBrowser

BROWSE_PROMPT: str = "[j/k move, enter open, / search, esc cancel, q quit] > "
SEARCH_PROMPT: str = "search (enter to open, esc to cancel) > "

_LINE_KEYS: dict[str, str] = {"": "enter", "esc": "escape"}


def run_browser(
    browser: SkillBrowser,
    *,
    read: Callable[[str], str],
    write: Callable[[str], object],
) -> None:
    """Drive *browser* one input line at a time until ``q`` or end of input.

    Outside search mode each line is a key command; an empty line is Enter.
    In search mode any other line becomes the search query.
    """
    while True:
        for line in browser.render():
            write(line)
        try:
            raw = read(SEARCH_PROMPT if browser.search_mode else BROWSE_PROMPT)
        except (EOFError, KeyboardInterrupt):
            return

        text = raw.strip()
        key = _LINE_KEYS.get(text.lower(), text.lower())
        if not browser.search_mode and key in KEY_QUIT:
            return
        if browser.handle_key(key):
            continue
        if browser.search_mode:
            browser.search(text)
        else:
            write(f"Unknown key: {text}")
