# SPDX-License-Identifier: MIT

from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, soft_wrap=True)


def emph(text: str) -> str:
    """Bold markup around user-supplied text."""
    return f"[bold]{escape(text)}[/bold]"


def project_suffix(project: Optional[str]) -> str:
    if project is None:
        return ""
    return f" in project {emph(project)}"


def info(message: str) -> None:
    """Print rich markup on stdout."""
    console.print(message)


def warn(message: str) -> None:
    error_console.print(f"[yellow]warning:[/yellow] {escape(message)}")


def die(message: str) -> NoReturn:
    error_console.print(f"[red]error:[/red] {escape(message)}")
    raise typer.Exit(1)
