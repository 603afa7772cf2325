"""Installers for skills, templates and the OpenCode plugin."""

from .opencode import install_opencode, uninstall_opencode
from .skills import install_all_skills, install_skill, install_templates, resolve_target_skills_dir

__all__ = [
    "install_all_skills",
    "install_opencode",
    "install_skill",
    "install_templates",
    "resolve_target_skills_dir",
    "uninstall_opencode",
]
