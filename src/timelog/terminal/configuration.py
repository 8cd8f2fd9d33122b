# SPDX-License-Identifier: MIT

import os
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from timelog import configuration
from timelog.repository.configuration import CONFIGURATION_REPO
from timelog.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _path_source(env_name: Optional[str], configured: object) -> str:
    if env_name is not None and os.environ.get(env_name):
        return f"env {env_name}"
    if configured is not None:
        return "config file"
    return "default"


def _yaml_library_type() -> str:
    try:
        from yaml import CDumper, CLoader  # noqa: F401
    except ImportError:
        return "Python"
    return "C"


@app.command("view, v")
def view() -> None:
    """Display the resolved settings and where each one comes from."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    paths = [
        ("data_path", configuration.DATA_PATH, None),
        ("state_path", configuration.STATE_PATH, configuration.ENV_STATE_PATH),
        ("record_path", configuration.RECORD_PATH, configuration.ENV_RECORD_PATH),
        ("plugin_path", configuration.PLUGIN_PATH, configuration.ENV_PLUGIN_PATH),
    ]

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_column("Source")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH), "")
    for key, path, env_name in paths:
        table.add_row(key, str(path), _path_source(env_name, config.get(key)))
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled", ""
    )

    console.print(table)
    console.print()
    console.print(f"YAML Library Type: {_yaml_library_type()}")
