# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timelog import configuration
from timelog.repository.configuration import CONFIGURATION_REPO
from timelog.view import state as view_state


def initialize() -> None:
    configuration.load_config_path()
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    CONFIGURATION_REPO.reset()
    config = CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()

    configuration.load_path_configuration()
    __ensure_data_dirs()

    view_state.set_show_header(config["show_header"])


def configure_logging(verbose: bool) -> None:
    """Route diagnostics through rich on stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config: configuration.Configuration = {
            "data_path": None,
            "state_path": None,
            "record_path": None,
            "plugin_path": None,
            "show_header": True,
        }
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_dirs() -> None:
    configuration.STATE_PATH.parent.mkdir(parents=True, exist_ok=True)
    configuration.RECORD_PATH.parent.mkdir(parents=True, exist_ok=True)
