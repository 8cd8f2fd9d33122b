# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from timelog.model.record import Record


class TimelogError(Exception):
    """Base class for every error surfaced to the user as 'error: <message>'."""

    pass


# ─────────────────────────────────────────────────────────────
# Categories
# ─────────────────────────────────────────────────────────────


class PreconditionError(TimelogError):
    """The requested transition is illegal in the current tracking state."""

    pass


class NotFoundError(TimelogError):
    pass


class ValidationError(TimelogError):
    pass


class StorageError(TimelogError):
    pass


class PluginError(TimelogError):
    pass


# ─────────────────────────────────────────────────────────────
# Task lifecycle
# ─────────────────────────────────────────────────────────────


class AlreadyInProgressError(PreconditionError):
    def __init__(self) -> None:
        super().__init__(
            "a task is already in progress; run `timelog pause` or `timelog stop`"
        )


class NoActiveTaskError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("no active task to pause")


class AlreadyPausedError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("task is already paused; use `timelog resume`")


class NoPausedTaskError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("no paused task to resume")


class AlreadyActiveError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("task is already running")


class NoTaskInProgressError(PreconditionError):
    def __init__(self, message: str = "no task in progress") -> None:
        super().__init__(message)


class InvalidTaskError(ValidationError):
    def __init__(self) -> None:
        super().__init__("task name must not be empty")


# ─────────────────────────────────────────────────────────────
# Stores
# ─────────────────────────────────────────────────────────────


class StateNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("no state file found")


class RecordsNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("no records found")


class ConfigFileError(StorageError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to read config file {path}: {reason}")


class RecordParseError(StorageError):
    def __init__(self, line: int, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Unable to read record on line {line}: {reason}")


# ─────────────────────────────────────────────────────────────
# Amend
# ─────────────────────────────────────────────────────────────


class RecordNotFoundError(NotFoundError):
    def __init__(self, date: str, pattern: str) -> None:
        super().__init__(
            f"no records found matching date {date} and task pattern '{pattern}'"
        )


class AmbiguousMatchError(ValidationError):
    def __init__(self, candidates: list[Record]) -> None:
        self.candidates = candidates
        super().__init__(
            f"found {len(candidates)} matching records; "
            "use a more specific task pattern to match exactly one record"
        )


class InvalidDurationError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Duration must be positive")


class NoChangesError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "No changes specified. Use --new-task, --new-duration, or --new-project"
        )


# ─────────────────────────────────────────────────────────────
# Plugins
# ─────────────────────────────────────────────────────────────


class NoPluginsError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(
            "No plugins available. Use --list-plugins to see setup instructions."
        )


class PluginNotFoundError(NotFoundError):
    def __init__(self, name: str, location: Optional[str] = None) -> None:
        self.name = name
        if location is None:
            super().__init__(f"Plugin '{name}' not found")
        else:
            super().__init__(f"Plugin '{name}' not found at {location}")


class AmbiguousPluginError(ValidationError):
    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(
            "Multiple plugins available, specify one with --plugin <name>: "
            + ", ".join(names)
        )


class PluginConfigError(StorageError):
    pass


class PluginTransportError(PluginError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"plugin transport error: {reason}")


class PluginExitError(PluginError):
    def __init__(self, returncode: int, stderr: str) -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"plugin exited with code {returncode}: {stderr.strip()}")


class MalformedResponseError(PluginError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"malformed plugin response: {reason}")
