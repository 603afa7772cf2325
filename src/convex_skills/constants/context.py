"""Constants for deployment context extraction."""

from __future__ import annotations

import re

PACKAGE_JSON_FILENAME: str = "package.json"
ENV_LOCAL_FILENAME: str = ".env.local"
DEFAULT_PROJECT_NAME: str = "convex-project"

TABLE_DEFINITION_PATTERN: re.Pattern[str] = re.compile(r"(\w+):\s*defineTable\(")

SCHEMA_HASH_LENGTH: int = 16
CONTEXT_TEMP_PREFIX: str = ".tmp-context-"
CONTEXT_TEMP_SUFFIX: str = ".json"

FUNCTION_EXPORT_PATTERN: re.Pattern[str] = re.compile(
    r"export\s+const\s+(\w+)\s*=\s*"
    r"(query|mutation|action|httpAction|internalQuery|internalMutation|internalAction)\s*\("
)
FUNCTION_SOURCE_SUFFIXES: tuple[str, ...] = (".ts", ".js")
INTERNAL_FUNCTION_TYPES: dict[str, str] = {
    "internalQuery": "query",
    "internalMutation": "mutation",
    "internalAction": "action",
}
