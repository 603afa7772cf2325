"""Bundled skill repository."""

from .frontmatter import read_frontmatter
from .repository import SkillRepository, get_skills_path, get_templates_path

__all__ = ["SkillRepository", "get_skills_path", "get_templates_path", "read_frontmatter"]
