# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SPLIT_P = re.compile(r" ?, ?")

COMMAND_ORDER = [
    "start, st",
    "pause, p",
    "resume, r",
    "stop, sp",
    "status, s",
    "report, rp",
    "amend, am",
    "upload, u",
    "config, c",
    "version, ve",
]


def split_aliases(registered_name: str) -> list[str]:
    """'stop, sp' -> ['stop', 'sp']"""
    return _ALIAS_SPLIT_P.split(registered_name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as 'name, alias, ...'"""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._registered_name(cmd_name))

    def _registered_name(self, typed_name: str) -> str:
        for registered_name in self.commands:
            if typed_name in split_aliases(registered_name):
                return registered_name
        return typed_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name if name is not None else cmd.name
        registered_name = self._registered_name(name or "")
        # Already registered under its full alias list
        if registered_name in self.commands and registered_name != name:
            return
        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists commands in lifecycle order in --help, extras last"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
