"""Config file validation for convex-skills."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from convex_skills.constants.config import ALLOWED_CONFIG_KEYS, ALLOWED_WATCH_KEYS, CONFIG_FILENAME
from convex_skills.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007
from convex_skills.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
) -> list[ValidationError]:
    """Validate a convex-skills.yaml file and return all validation errors.

    Unlike :func:`~convex_skills.config.load_config`, this never raises and
    reports every problem it finds rather than stopping at the first.
    """
    errors: list[ValidationError] = []
    if not root.is_dir():
        return [
            ValidationError(
                code=CFG007,
                path=str(root),
                field="",
                message=f"root directory does not exist: {root}",
            )
        ]

    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_path is not None:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}")]

    if raw is None:
        return errors
    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"top-level value must be a mapping, got {type(raw).__name__}",
            )
        ]

    errors.extend(_check_unknown_keys(raw, ALLOWED_CONFIG_KEYS, path_str, prefix=""))

    if "target" in raw and raw["target"] is not None and not _is_nonempty_str(raw["target"]):
        errors.append(_type_error(path_str, "target", "a non-empty string", raw["target"]))

    if "link" in raw and not isinstance(raw["link"], bool):
        errors.append(_type_error(path_str, "link", "a boolean", raw["link"]))

    if "reminder_cooldown_s" in raw:
        errors.extend(_check_positive(raw["reminder_cooldown_s"], path_str, "reminder_cooldown_s", integer=False))

    watch_raw = raw.get("watch")
    if watch_raw is not None:
        if not isinstance(watch_raw, dict):
            errors.append(_type_error(path_str, "watch", "a mapping", watch_raw))
        else:
            errors.extend(_check_unknown_keys(watch_raw, ALLOWED_WATCH_KEYS, path_str, prefix="watch."))
            if "quiet_period_ms" in watch_raw:
                errors.extend(
                    _check_positive(watch_raw["quiet_period_ms"], path_str, "watch.quiet_period_ms", integer=True)
                )
            for key in ("directory", "schema_filename", "exclude_segment"):
                if key in watch_raw and not _is_nonempty_str(watch_raw[key]):
                    errors.append(_type_error(path_str, f"watch.{key}", "a non-empty string", watch_raw[key]))

    return errors


def _is_nonempty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _type_error(path: str, field: str, expected: str, value: Any) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path,
        field=field,
        message=f"{field} must be {expected}, got {type(value).__name__}",
    )


def _check_positive(value: Any, path: str, field: str, *, integer: bool) -> list[ValidationError]:
    allowed: tuple[type, ...] = (int,) if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, allowed):
        expected = "an integer" if integer else "a number"
        return [_type_error(path, field, expected, value)]
    if value <= 0:
        return [
            ValidationError(
                code=CFG006,
                path=path,
                field=field,
                message=f"{field} must be positive, got {value}",
            )
        ]
    return []


def _check_unknown_keys(
    raw: dict[str, Any],
    allowed: frozenset[str],
    path: str,
    *,
    prefix: str,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for key in sorted(str(k) for k in raw):
        if key in allowed:
            continue
        suggestions = difflib.get_close_matches(key, sorted(allowed), n=1)
        errors.append(
            ValidationError(
                code=CFG004,
                path=path,
                field=f"{prefix}{key}",
                message=f"unknown key: {prefix}{key}",
                hint=f"did you mean '{prefix}{suggestions[0]}'?" if suggestions else "",
            )
        )
    return errors
