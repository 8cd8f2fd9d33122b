# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from timelog.service.error import ConfigFileError

APP_NAME = "timelog"

ENV_CONFIG_PATH = "TIMELOG_CONFIG_PATH"
ENV_STATE_PATH = "TIMELOG_STATE_PATH"
ENV_RECORD_PATH = "TIMELOG_RECORD_PATH"
ENV_PLUGIN_PATH = "TIMELOG_PLUGIN_PATH"

PLUGIN_PREFIX = "timelog-"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
STATE_PATH: Path = DATA_PATH / "state.yaml"
RECORD_PATH: Path = DATA_PATH / "records.csv"
PLUGIN_PATH: Path = DATA_PATH / "plugins"


class Configuration(TypedDict):
    data_path: Optional[str]
    state_path: NotRequired[Optional[str]]
    record_path: NotRequired[Optional[str]]
    plugin_path: NotRequired[Optional[str]]
    show_header: bool


def load_config_path() -> None:
    """Point APP_CONFIG_PATH at the file named by TIMELOG_CONFIG_PATH, if set."""
    global CONFIG_PATH, APP_CONFIG_PATH

    custom_config_path = os.environ.get(ENV_CONFIG_PATH)
    if custom_config_path:
        APP_CONFIG_PATH = Path(custom_config_path)
        CONFIG_PATH = APP_CONFIG_PATH.parent
    else:
        CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
        APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


def read_config_file(path: Path) -> Optional[Configuration]:
    """Parse config.yaml; None for an empty file."""
    try:
        raw_config = load(path.read_text(), Loader=Loader)
    except OSError as e:
        raise ConfigFileError(path, str(e)) from e
    except YAMLError as e:
        raise ConfigFileError(path, "not valid YAML") from e
    if raw_config is not None and not isinstance(raw_config, dict):
        raise ConfigFileError(path, "expected a mapping of settings")
    return raw_config


def load_path_configuration() -> None:
    """
    Resolve the data file locations.

    Each path is taken from its environment variable first, then from the
    config file, then from the platform data directory. This must be called
    before any repositories are instantiated.
    """
    global DATA_PATH, STATE_PATH, RECORD_PATH, PLUGIN_PATH

    config: Optional[Configuration] = None
    if APP_CONFIG_PATH.is_file():
        config = read_config_file(APP_CONFIG_PATH)

    DATA_PATH = platformdirs.user_data_path(APP_NAME)
    if config is not None and config.get("data_path") is not None:
        DATA_PATH = Path(str(config["data_path"])).expanduser()

    STATE_PATH = __resolve_path(
        ENV_STATE_PATH,
        config.get("state_path") if config is not None else None,
        DATA_PATH / "state.yaml",
    )
    RECORD_PATH = __resolve_path(
        ENV_RECORD_PATH,
        config.get("record_path") if config is not None else None,
        DATA_PATH / "records.csv",
    )
    PLUGIN_PATH = __resolve_path(
        ENV_PLUGIN_PATH,
        config.get("plugin_path") if config is not None else None,
        DATA_PATH / "plugins",
    )


def __resolve_path(env_name: str, configured: Optional[str], default: Path) -> Path:
    from_env = os.environ.get(env_name)
    if from_env:
        return Path(from_env)
    if configured is not None:
        return Path(configured).expanduser()
    return default
