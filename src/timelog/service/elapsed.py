# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any

import pendulum

from timelog import time
from timelog.model.tracked_state import TrackedState


def clamp_nonneg(ms: int) -> int:
    return ms if ms > 0 else 0


def is_active(state: TrackedState) -> bool:
    return state["started"] is not None


def elapsed_ms(state: TrackedState, now: pendulum.DateTime) -> int:
    """
    Total elapsed milliseconds for a tracked task.

    The result is unclamped; it can only be negative if the clock moved
    backwards after the current segment started.
    """
    total = state["accumulated_ms"]
    if state["started"] is not None:
        total += time.milliseconds_between(state["started"], now)
    return total


def paused(state: TrackedState, now: pendulum.DateTime) -> TrackedState:
    """Bank the running segment and stop counting."""
    paused_state = deepcopy(state)
    paused_state["accumulated_ms"] = clamp_nonneg(elapsed_ms(state, now))
    paused_state["started"] = None
    return paused_state


def resumed(state: TrackedState, now: pendulum.DateTime) -> TrackedState:
    """Start a new running segment on top of the banked time."""
    resumed_state = deepcopy(state)
    resumed_state["started"] = now
    return resumed_state


# ─────────────────────────────────────────────────────────────
# Legacy single-anchor encoding
#
# Older state files stored one `timestamp` whose meaning depended on
# `active`: the start of counting while active, or epoch + accumulated
# elapsed time while paused.
# ─────────────────────────────────────────────────────────────


def is_legacy_state(raw_state: dict[str, Any]) -> bool:
    return "timestamp" in raw_state and "active" in raw_state


def from_anchor(
    anchor: pendulum.DateTime, active: bool, task: str, project: Any
) -> TrackedState:
    if active:
        return {
            "task": task,
            "project": project,
            "started": anchor,
            "accumulated_ms": 0,
        }
    return {
        "task": task,
        "project": project,
        "started": None,
        "accumulated_ms": clamp_nonneg(time.milliseconds_between(time.EPOCH, anchor)),
    }
