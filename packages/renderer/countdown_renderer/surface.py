"""Pillow-backed 2D drawing surface with a canvas-style API."""

from __future__ import annotations

import logging
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger("countdown.renderer")

FONT_FILES: dict[str, tuple[str, ...]] = {
    "open sans": ("OpenSans-Regular.ttf", "DejaVuSans.ttf", "Arial.ttf"),
    "open sans bold": ("OpenSans-Bold.ttf", "DejaVuSans-Bold.ttf", "Arial Bold.ttf"),
    "courier new": ("cour.ttf", "Courier New.ttf", "DejaVuSansMono.ttf"),
    "courier new bold": ("courbd.ttf", "Courier New Bold.ttf", "DejaVuSansMono-Bold.ttf"),
}

FONT_DIRS = (
    "",
    "/usr/share/fonts/truetype/dejavu/",
    "/usr/share/fonts/truetype/msttcorefonts/",
    "/usr/share/fonts/TTF/",
    "/Library/Fonts/",
    "/System/Library/Fonts/Supplemental/",
    "C:/Windows/Fonts/",
)

_H_ANCHOR = {"left": "l", "start": "l", "center": "m", "right": "r", "end": "r"}
_V_ANCHOR = {"top": "t", "middle": "m", "alphabetic": "s", "bottom": "b", "hanging": "a"}


def _candidates(family: str, style: str) -> tuple[str, ...]:
    key = family.strip().lower()
    if "bold" in style.lower():
        key = f"{key} bold"
    if key in FONT_FILES:
        return FONT_FILES[key]
    if family.lower().endswith((".ttf", ".otf", ".ttc")):
        return (family,)
    return (f"{family}.ttf",)


@lru_cache(maxsize=64)
def resolve_font(family: str, size: int, style: str = ""):
    """Return a truetype font for ``family``, falling back to Pillow's default font."""
    size = max(1, int(size))
    for name in _candidates(family, style):
        for base in FONT_DIRS:
            try:
                return ImageFont.truetype(base + name, size)
            except OSError:
                continue
    logger.warning(f"no truetype font for {family!r}, using default", extra={"event": "font_fallback"})
    return ImageFont.load_default(size=size)


def font_path(family: str, style: str = "") -> str | None:
    path = getattr(resolve_font(family, 12, style), "path", None)
    return path if isinstance(path, str) else None


class DrawingSurface:
    """Single mutable canvas; paint operations overwrite in place."""

    def __init__(self, width: int, height: int, background: str = "#ffffff") -> None:
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)
        self.fill_style = "#000000"
        self.text_align = "left"
        self.text_baseline = "alphabetic"
        self._font = resolve_font("Open Sans", 10)

    def set_font(self, family: str, size: int, style: str = "") -> None:
        self._font = resolve_font(family, size, style)

    @property
    def font(self):
        return self._font

    def _anchor(self) -> str:
        return _H_ANCHOR.get(self.text_align, "l") + _V_ANCHOR.get(self.text_baseline, "s")

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        if w <= 0 or h <= 0:
            return
        self._draw.rectangle((x, y, x + w - 1, y + h - 1), fill=self.fill_style)

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._draw.text((x, y), text, font=self._font, fill=self.fill_style, anchor=self._anchor())

    def measure_text(self, text: str) -> float:
        return float(self._draw.textlength(text, font=self._font))

    def snapshot(self) -> Image.Image:
        return self.image.copy()
