from __future__ import annotations

from enum import Enum


class SolveTarget(str, Enum):
    """Which cycle variable the simulator derives from the other two."""

    FINAL_WEIGHT = "final_weight"
    GMD = "gmd"
    DAYS = "days"


class CycleVerdict(str, Enum):
    PROFITABLE = "profitable"
    MARGIN_ALERT = "margin_alert"
    LOSS = "loss"
