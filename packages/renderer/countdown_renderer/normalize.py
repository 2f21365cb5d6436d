"""Clamp caller-supplied render parameters into safe operating ranges."""

from __future__ import annotations

import logging
import re

from .models import RenderConfig

WIDTH_RANGE = (150, 500)
HEIGHT_RANGE = (80, 500)
FRAME_RANGE = (1, 90)

DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_BACKGROUND_COLOR = "#ffffff"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_NAME_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")

logger = logging.getLogger("countdown.renderer")


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def normalize(width: int, height: int, frame_count: int) -> tuple[int, int, int]:
    return (
        clamp(int(width), *WIDTH_RANGE),
        clamp(int(height), *HEIGHT_RANGE),
        clamp(int(frame_count), *FRAME_RANGE),
    )


def normalize_color(value: str | None, default: str) -> str:
    match = _HEX_RE.match((value or "").strip())
    if not match:
        logger.warning(f"invalid color {value!r}, using {default}", extra={"event": "color_fallback"})
        return default
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def safe_name(name: str | None) -> str:
    cleaned = _NAME_UNSAFE.sub("-", (name or "").strip()).strip(".-")
    return cleaned or "default"


def build_render_config(
    width: int = 200,
    height: int = 80,
    frame_count: int = 30,
    text_color: str | None = "000000",
    background_color: str | None = "ffffff",
    name: str | None = "default",
    title: str = "Countdown!",
) -> RenderConfig:
    w, h, frames = normalize(width, height, frame_count)
    if (w, h, frames) != (width, height, frame_count):
        logger.info(
            f"render parameters clamped to {w}x{h} frames={frames}",
            extra={"event": "params_clamped"},
        )
    return RenderConfig(
        width=w,
        height=h,
        frame_count=frames,
        background_color=normalize_color(background_color, DEFAULT_BACKGROUND_COLOR),
        text_color=normalize_color(text_color, DEFAULT_TEXT_COLOR),
        artifact_name=safe_name(name),
        title=title,
    )
