# SPDX-License-Identifier: MIT

from pathlib import Path

from rich.markup import escape

from timelog import configuration
from timelog.model.plugin import PluginResponse
from timelog.view.message import emph, info, warn


def plugin_list(plugins: list[str], plugin_path: Path) -> None:
    if len(plugins) == 0:
        info("No plugins found")
        info(f"Place plugin scripts in: {escape(str(plugin_path))}")
        info(
            f"Plugin scripts should be named '{configuration.PLUGIN_PREFIX}<name>' "
            "and be executable"
        )
        return

    info("Available plugins:")
    for plugin in plugins:
        info(f"  • {escape(plugin)}")


def executing(name: str, dry_run: bool) -> None:
    info(f"Executing plugin: {emph(name)}")
    if dry_run:
        info("(dry run mode)")


def plugin_response(response: PluginResponse) -> None:
    """Successful responses go to stdout; reported failures become warnings."""
    if response["success"]:
        info(escape(response["message"]))
        if response["uploaded_count"] is not None:
            info(f"Processed {response['uploaded_count']} records")
        if len(response["errors"]) > 0:
            warn("Some warnings occurred:")
            for error in response["errors"]:
                warn(f"  {error}")
        return

    warn(f"Plugin failed: {response['message']}")
    for error in response["errors"]:
        warn(f"  {error}")
