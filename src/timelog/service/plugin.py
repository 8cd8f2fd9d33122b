# SPDX-License-Identifier: MIT

import json
import logging
import subprocess
from typing import Any, Optional

from timelog.model.plugin import PluginRequest, PluginResponse
from timelog.model.record import Record
from timelog.service.error import (
    AmbiguousPluginError,
    MalformedResponseError,
    NoPluginsError,
    PluginExitError,
    PluginNotFoundError,
    PluginTransportError,
)
from timelog.service.store import PluginRegistry
from timelog.time import date_to_str

logger = logging.getLogger(__name__)

DRY_RUN_FLAG = "--dry-run"


def select_plugin(registry: PluginRegistry, requested: Optional[str]) -> str:
    """
    Resolve which plugin to run.

    An explicit name must be registered. Without one, a lone registered
    plugin is chosen; zero or several are errors.
    """
    plugins = registry.list_plugins()
    if requested is not None:
        if requested not in plugins:
            raise PluginNotFoundError(requested, str(registry.path_for(requested)))
        return requested
    if len(plugins) == 0:
        raise NoPluginsError()
    if len(plugins) > 1:
        raise AmbiguousPluginError(plugins)
    return plugins[0]


def build_request(
    records: list[Record], period_name: str, config: dict[str, Any]
) -> PluginRequest:
    return {"records": records, "period": period_name, "config": config}


def serialize_request(request: PluginRequest) -> str:
    return json.dumps(
        {
            "records": [
                {
                    "task": record["task"],
                    "duration_ms": record["duration_ms"],
                    "date": date_to_str(record["date"]),
                    "project": record["project"],
                }
                for record in request["records"]
            ],
            "period": request["period"],
            "config": request["config"],
        }
    )


def parse_response(output: bytes) -> PluginResponse:
    """Validate a plugin's stdout against the response contract."""
    try:
        raw_response = json.loads(output.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedResponseError(str(e)) from e

    if not isinstance(raw_response, dict):
        raise MalformedResponseError("expected a JSON object")

    success = raw_response.get("success")
    if not isinstance(success, bool):
        raise MalformedResponseError("'success' must be a boolean")

    message = raw_response.get("message")
    if not isinstance(message, str):
        raise MalformedResponseError("'message' must be a string")

    errors = raw_response.get("errors")
    if not isinstance(errors, list) or not all(isinstance(e, str) for e in errors):
        raise MalformedResponseError("'errors' must be a list of strings")

    uploaded_count = raw_response.get("uploaded_count")
    if uploaded_count is not None and (
        isinstance(uploaded_count, bool)
        or not isinstance(uploaded_count, int)
        or uploaded_count < 0
    ):
        raise MalformedResponseError("'uploaded_count' must be a non-negative integer")

    return {
        "success": success,
        "uploaded_count": uploaded_count,
        "message": message,
        "errors": errors,
    }


def execute_plugin(
    registry: PluginRegistry,
    name: str,
    request: PluginRequest,
    dry_run: bool = False,
) -> PluginResponse:
    """
    Run a plugin and return its parsed response.

    The request goes to the child's stdin as JSON. A non-zero exit is always
    a failure whatever the child printed. A response with success=false is
    returned, not raised. No timeout is applied.
    """
    plugin_path = registry.path_for(name)
    if not plugin_path.exists():
        raise PluginNotFoundError(name, str(plugin_path))

    args = [str(plugin_path)]
    if dry_run:
        args.append(DRY_RUN_FLAG)
    payload = serialize_request(request).encode("utf-8")

    logger.debug("running plugin %s with %d records", args, len(request["records"]))
    try:
        completed = subprocess.run(
            args,
            input=payload,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as e:
        raise PluginTransportError(f"failed to start plugin '{name}': {e}") from e

    stderr = completed.stderr.decode("utf-8", errors="replace")
    logger.debug(
        "plugin %s exited with code %d (%d bytes on stderr)",
        name,
        completed.returncode,
        len(completed.stderr),
    )
    if completed.returncode != 0:
        raise PluginExitError(completed.returncode, stderr)

    return parse_response(completed.stdout)
