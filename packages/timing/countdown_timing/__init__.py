"""Countdown timing: target parsing and remaining-duration decomposition."""

from .decomposer import PASSED_MESSAGE, compute_initial, decompose, display_breakdown, parse_target, tick
from .models import Active, CountdownState, Passed, RemainingDuration, UnitBreakdown

__all__ = [
    "Active",
    "CountdownState",
    "PASSED_MESSAGE",
    "Passed",
    "RemainingDuration",
    "UnitBreakdown",
    "compute_initial",
    "decompose",
    "display_breakdown",
    "parse_target",
    "tick",
]
