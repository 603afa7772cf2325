"""Deployment context extraction for Convex projects."""

from .functions import extract_functions, scan_functions
from .project import get_deployment_context, is_convex_project, read_env_var_names, read_project_name
from .schema import extract_table_names, schema_hash

__all__ = [
    "extract_functions",
    "extract_table_names",
    "get_deployment_context",
    "is_convex_project",
    "read_env_var_names",
    "read_project_name",
    "scan_functions",
    "schema_hash",
]
