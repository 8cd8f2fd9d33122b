# SPDX-License-Identifier: MIT

from importlib import metadata

from timelog import configuration
from timelog.view.message import info


def version() -> None:
    """
    show the installed version
    """
    try:
        installed_version = metadata.version(configuration.APP_NAME)
    except metadata.PackageNotFoundError:
        installed_version = "unknown"
    info(f"{configuration.APP_NAME} {installed_version}")
