"""Typed timing models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


@dataclass
class RemainingDuration:
    """Seconds left until the target; mutated in place by ``tick``."""

    seconds: float

    @property
    def expired(self) -> bool:
        return self.seconds <= 0


@dataclass(frozen=True)
class UnitBreakdown:
    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def padded(self) -> tuple[str, str, str, str]:
        return (
            f"{self.days:02d}",
            f"{self.hours:02d}",
            f"{self.minutes:02d}",
            f"{self.seconds:02d}",
        )

    def as_dict(self) -> dict[str, int]:
        return {"days": self.days, "hours": self.hours, "minutes": self.minutes, "seconds": self.seconds}


@dataclass(frozen=True)
class Passed:
    message: str


@dataclass(frozen=True)
class Active:
    duration: RemainingDuration


CountdownState = Union[Passed, Active]
