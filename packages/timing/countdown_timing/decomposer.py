"""Remaining-duration arithmetic for countdown frames."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta

from .models import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Active,
    CountdownState,
    Passed,
    RemainingDuration,
    UnitBreakdown,
)

PASSED_MESSAGE = "Date has passed!"

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_target(text: str) -> datetime:
    """Parse an ISO-8601-like timestamp into an aware datetime.

    Naive values are interpreted in the local timezone. A bare date means midnight.
    Raises ``ValueError`` for anything else ``datetime.fromisoformat`` rejects.
    """
    value = (text or "").strip()
    if not value:
        raise ValueError("empty timestamp")
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    if _DATE_ONLY.match(value):
        value += "T00:00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        # astimezone() on a naive datetime assumes system local time.
        parsed = parsed.astimezone()
    return parsed


def compute_initial(target: datetime, now: datetime) -> CountdownState:
    diff: timedelta = target - now
    seconds = diff.total_seconds()
    if seconds <= 0:
        return Passed(PASSED_MESSAGE)
    return Active(RemainingDuration(seconds))


def decompose(duration: RemainingDuration | float) -> UnitBreakdown:
    total = duration.seconds if isinstance(duration, RemainingDuration) else duration
    days = math.floor(total / SECONDS_PER_DAY)
    hours = math.floor(total / SECONDS_PER_HOUR) - days * 24
    minutes = math.floor(total / SECONDS_PER_MINUTE) - days * 1440 - hours * 60
    seconds = math.floor(total) - days * SECONDS_PER_DAY - hours * SECONDS_PER_HOUR - minutes * SECONDS_PER_MINUTE
    return UnitBreakdown(days=days, hours=hours, minutes=minutes, seconds=seconds)


def display_breakdown(duration: RemainingDuration) -> UnitBreakdown:
    """Breakdown shown on a frame; frames past the deadline read all zeros."""
    return decompose(max(duration.seconds, 0.0))


def tick(duration: RemainingDuration) -> RemainingDuration:
    duration.seconds -= 1
    return duration
