"""Frame sequence driver: paints and encodes one frame per countdown tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from countdown_renderer import DrawingSurface, FontSpec, RenderConfig, paint_countdown_frame, paint_passed_frame
from countdown_timing import Active, CountdownState, Passed, UnitBreakdown, display_breakdown, tick

logger = logging.getLogger("countdown.driver")


class DriverState(str, Enum):
    INIT = "Init"
    ACTIVE = "Active"
    PASSED_TERMINAL = "PassedTerminal"
    DONE = "Done"


class FrameEncoder(Protocol):
    def add_frame(self, frame) -> None: ...

    def finish(self) -> None: ...


@dataclass(frozen=True)
class FrameRecord:
    index: int
    breakdown: UnitBreakdown | None
    text: str


@dataclass
class RenderReport:
    passed: bool = False
    frames: list[FrameRecord] = field(default_factory=list)

    @property
    def frame_count(self) -> int:
        return len(self.frames)


class FrameSequenceDriver:
    def __init__(
        self,
        config: RenderConfig,
        surface: DrawingSurface,
        encoder: FrameEncoder,
        fonts: FontSpec | None = None,
    ) -> None:
        self.config = config
        self.surface = surface
        self.encoder = encoder
        self.fonts = fonts or FontSpec()
        self.state = DriverState.INIT

    def run(self, countdown: CountdownState) -> RenderReport:
        if self.state is not DriverState.INIT:
            raise RuntimeError(f"driver already ran (state={self.state.value})")

        report = RenderReport()
        if isinstance(countdown, Passed):
            self.state = DriverState.PASSED_TERMINAL
            report.passed = True
            paint_passed_frame(self.surface, self.config, countdown.message, self.fonts)
            self.encoder.add_frame(self.surface)
            report.frames.append(FrameRecord(index=0, breakdown=None, text=countdown.message))
        elif isinstance(countdown, Active):
            self.state = DriverState.ACTIVE
            duration = countdown.duration
            for index in range(self.config.frame_count):
                breakdown = display_breakdown(duration)
                values = breakdown.padded()
                paint_countdown_frame(self.surface, self.config, values, self.fonts)
                self.encoder.add_frame(self.surface)
                report.frames.append(FrameRecord(index=index, breakdown=breakdown, text=" ".join(values)))
                tick(duration)
        else:
            raise TypeError(f"unsupported countdown state: {countdown!r}")

        self.state = DriverState.DONE
        self.encoder.finish()
        logger.info(
            f"rendered {report.frame_count} frame(s) passed={report.passed}",
            extra={"event": "frames_rendered", "frames": report.frame_count, "passed": report.passed},
        )
        return report
