"""Fixed horizontal box layout for the four countdown units."""

from __future__ import annotations

from .models import Box, RenderConfig

UNIT_LABELS = ("DAYS", "HOURS", "MINUTES", "SECONDS")
MARGIN_X = 0
MARGIN_Y = 0


def box_gap(width: int) -> int:
    return width // 29


def box_width(width: int) -> int:
    return (width - 3 * box_gap(width)) // 4


def compute_box_layout(config: RenderConfig) -> list[Box]:
    gap = box_gap(config.width)
    w = box_width(config.width)
    return [
        Box(label=label, x=MARGIN_X + idx * (w + gap), y=MARGIN_Y, w=w, h=config.height)
        for idx, label in enumerate(UNIT_LABELS)
    ]
