"""Shared file I/O helpers."""

from .files import copy_file, ensure_dir, link_file
from .json_io import write_json_atomic, write_text_atomic

__all__ = ["copy_file", "ensure_dir", "link_file", "write_json_atomic", "write_text_atomic"]
