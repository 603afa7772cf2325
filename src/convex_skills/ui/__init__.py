"""Keyboard-driven skill browser."""

from .browser import SkillBrowser, skill_document_url

__all__ = ["SkillBrowser", "skill_document_url"]
