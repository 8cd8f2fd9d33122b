# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timelog import configuration

# Keys added after the first release, with the value older files imply
CONFIG_DEFAULTS: dict[str, Any] = {
    "data_path": None,
    "state_path": None,
    "record_path": None,
    "plugin_path": None,
    "show_header": True,
}


class ConfigurationRepository:
    """Lazily loaded view of config.yaml; call flush() to persist migrations."""

    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self._config = self.__load_data()
        return self._config

    def __load_data(self) -> configuration.Configuration:
        raw_config = configuration.read_config_file(configuration.APP_CONFIG_PATH)
        settings: dict[str, Any] = dict(raw_config) if raw_config is not None else {}

        for key, default in CONFIG_DEFAULTS.items():
            if key not in settings:
                settings[key] = default
                self.is_dirty = True
        return cast(configuration.Configuration, settings)

    def flush(self) -> None:
        if self._config is None or not self.is_dirty:
            return
        configuration.APP_CONFIG_PATH.write_text(dump(dict(self._config), Dumper=Dumper))
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False


CONFIGURATION_REPO = ConfigurationRepository()
