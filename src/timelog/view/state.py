# SPDX-License-Identifier: MIT

"""Per-invocation view settings."""

from contextvars import ContextVar

# Set from config.yaml `show_header`, then from the global --no-header flag
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """True unless headers were turned off in config or with --no-header."""
    return _show_header_var.get()
