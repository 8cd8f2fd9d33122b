# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from timelog.model.period import Period
from timelog.repository.plugin import PluginRepository
from timelog.repository.record import RecordRepository
from timelog.service.error import PluginError, TimelogError
from timelog.service.period import period_range
from timelog.service.plugin import build_request, execute_plugin, select_plugin
from timelog.service.report import filter_records
from timelog.terminal.completion import complete_plugin, complete_project
from timelog.time import today_local
from timelog.view.message import die, warn
from timelog.view.views import plugin as plugin_view


def upload(
    period: Annotated[
        Optional[Period],
        typer.Argument(help="period to upload; required unless --list-plugins"),
    ] = None,
    plugin: Annotated[
        Optional[str],
        typer.Option(
            "--plugin",
            "-pl",
            help="plugin to run; optional when exactly one is installed",
            autocompletion=complete_plugin,
        ),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="only upload records of this project",
            autocompletion=complete_project,
        ),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="pass --dry-run to the plugin")
    ] = False,
    list_plugins: Annotated[
        bool, typer.Option("--list-plugins", help="list installed plugins")
    ] = False,
) -> None:
    """
    send recorded time for a period to an upload plugin
    """
    registry = PluginRepository()

    if list_plugins:
        plugin_view.plugin_list(registry.list_plugins(), registry.path)
        return

    if period is None:
        raise typer.BadParameter(
            "a period is required unless --list-plugins is given",
            param_hint="'PERIOD'",
        )

    try:
        records = RecordRepository().load_all()
        start, end = period_range(period, today_local())
        period_records = filter_records(records, start, end, project)
        if len(period_records) == 0:
            warn("no records in selected period")
            return

        plugin_name = select_plugin(registry, plugin)
        request = build_request(
            period_records, period.canonical_name, registry.resolve_config(plugin_name)
        )
    except TimelogError as e:
        die(str(e))

    plugin_view.executing(plugin_name, dry_run)
    try:
        response = execute_plugin(registry, plugin_name, request, dry_run)
    except PluginError as e:
        die(f"Plugin execution failed: {e}")
    except TimelogError as e:
        die(str(e))

    plugin_view.plugin_response(response)
