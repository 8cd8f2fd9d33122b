# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Protocol

from timelog.model.record import Record
from timelog.model.tracked_state import TrackedState


class StateStore(Protocol):
    """Holds the single in-progress task, or nothing when idle."""

    def exists(self) -> bool: ...

    def load(self) -> TrackedState: ...

    def save(self, state: TrackedState) -> None: ...

    def delete(self) -> None: ...


class RecordStore(Protocol):
    """Append-only log of completed records."""

    def load_all(self) -> list[Record]: ...

    def append(self, record: Record) -> None: ...

    def save_all(self, records: list[Record]) -> None: ...


class PluginRegistry(Protocol):
    def list_plugins(self) -> list[str]: ...

    def resolve_config(self, name: str) -> dict[str, Any]: ...

    def path_for(self, name: str) -> Path: ...
