# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict

from timelog.model.record import Record


class PluginRequest(TypedDict):
    records: list[Record]
    period: str  # Period.canonical_name
    config: dict[str, Any]


class PluginResponse(TypedDict):
    success: bool
    uploaded_count: Optional[int]
    message: str
    errors: list[str]
