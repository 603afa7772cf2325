"""Configuration loading for convex-skills."""

from .loader import load_config
from .model import SkillsConfig, WatchConfig
from .validator import validate_config_file

__all__ = ["SkillsConfig", "WatchConfig", "load_config", "validate_config_file"]
