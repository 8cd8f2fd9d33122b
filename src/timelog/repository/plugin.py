# SPDX-License-Identifier: MIT

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from timelog import configuration
from timelog.service.error import PluginConfigError

logger = logging.getLogger(__name__)


class PluginRepository:
    """
    Plugins are executables named `timelog-<name>` in the plugin directory.

    A sibling `timelog-<name>.json` file, when present, holds the plugin's
    configuration object.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.PLUGIN_PATH

    def list_plugins(self) -> list[str]:
        if not self.path.is_dir():
            return []

        plugins = []
        for file_path in self.path.iterdir():
            if not file_path.name.startswith(configuration.PLUGIN_PREFIX):
                continue
            if file_path.suffix == ".json" or not file_path.is_file():
                continue
            if not os.access(file_path, os.X_OK):
                continue
            name = file_path.name[len(configuration.PLUGIN_PREFIX) :]
            if name != "":
                plugins.append(name)
        logger.debug("found plugins %s in %s", plugins, self.path)
        return sorted(plugins)

    def path_for(self, name: str) -> Path:
        return self.path / f"{configuration.PLUGIN_PREFIX}{name}"

    def config_path_for(self, name: str) -> Path:
        return self.path / f"{configuration.PLUGIN_PREFIX}{name}.json"

    def resolve_config(self, name: str) -> dict[str, Any]:
        config_path = self.config_path_for(name)
        if not config_path.is_file():
            return {}
        try:
            config = json.loads(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise PluginConfigError(f"Failed to read plugin config {config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise PluginConfigError(f"Invalid plugin config JSON in {config_path}: {e}") from e
        if not isinstance(config, dict):
            raise PluginConfigError(f"Plugin config {config_path} must be a JSON object")
        return config
