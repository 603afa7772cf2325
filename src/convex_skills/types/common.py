"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

ChangeKind: TypeAlias = Literal["schema", "generic"]
RawEventKind: TypeAlias = Literal["created", "modified", "deleted", "moved"]
WatchState: TypeAlias = Literal["idle", "watching", "dispatching", "stopped"]
InstallAction: TypeAlias = Literal["installed", "linked", "created", "updated", "removed", "skipped"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
