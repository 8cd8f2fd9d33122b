# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timelog import configuration, time
from timelog.fileio import write_text_atomic
from timelog.model.tracked_state import TrackedState
from timelog.service import elapsed
from timelog.service.error import StateNotFoundError, StorageError

logger = logging.getLogger(__name__)


class StateRepository:
    """YAML file holding the task in progress; absent when idle."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.STATE_PATH

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> TrackedState:
        if not self.exists():
            raise StateNotFoundError()
        try:
            raw_state = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except OSError as e:
            raise StorageError(f"Unable to read state file {self.path}: {e}") from e
        except YAMLError as e:
            raise StorageError(f"State file {self.path} is not valid: {e}") from e

        if not isinstance(raw_state, dict):
            raise StorageError(f"State file {self.path} is not valid")
        logger.debug("loaded state from %s", self.path)
        # Legacy anchor files are converted here and take the two-field form
        # on the next save
        return self.__convert_state_for_deserialization(raw_state)

    def save(self, state: TrackedState) -> None:
        serializable_state = self.__convert_state_for_serialization(deepcopy(state))
        try:
            write_text_atomic(self.path, dump(serializable_state, Dumper=Dumper))
        except OSError as e:
            raise StorageError(f"Unable to write state file {self.path}: {e}") from e
        logger.debug("saved state to %s", self.path)

    def delete(self) -> None:
        try:
            self.path.unlink()
        except OSError as e:
            raise StorageError(f"Unable to delete state file {self.path}: {e}") from e
        logger.debug("deleted state file %s", self.path)

    def __convert_state_for_serialization(self, state: TrackedState) -> dict[str, Any]:
        serializable_state = cast(dict[str, Any], state)
        serializable_state["started"] = time.datetime_to_iso_str_optional(
            serializable_state["started"]
        )
        return serializable_state

    def __convert_state_for_deserialization(
        self, raw_state: dict[str, Any]
    ) -> TrackedState:
        try:
            if elapsed.is_legacy_state(raw_state):
                logger.debug("converting legacy anchor state in %s", self.path)
                return elapsed.from_anchor(
                    time.datetime_from_str(str(raw_state["timestamp"])),
                    bool(raw_state["active"]),
                    str(raw_state["task"]),
                    raw_state.get("project"),
                )

            return {
                "task": str(raw_state["task"]),
                "project": raw_state.get("project"),
                "started": time.datetime_from_str_optional(
                    None if raw_state.get("started") is None else str(raw_state["started"])
                ),
                "accumulated_ms": int(raw_state.get("accumulated_ms", 0)),
            }
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"State file {self.path} is not valid: {e}") from e
