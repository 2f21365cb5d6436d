"""Frame painters for the active countdown and the passed-deadline state."""

from __future__ import annotations

from .layout import compute_box_layout
from .models import Box, FontSpec, RenderConfig
from .surface import DrawingSurface

VALUE_Y_DIVISOR = 2.9
LABEL_Y_RATIO = 0.78


def draw_box(
    surface: DrawingSurface,
    config: RenderConfig,
    box: Box,
    value: str,
    fonts: FontSpec,
) -> None:
    surface.fill_style = config.background_color
    surface.fill_rect(box.x, box.y, box.w, box.h)

    surface.fill_style = config.text_color
    surface.text_align = "center"
    surface.text_baseline = "middle"
    center_x = box.x + box.w / 2

    surface.set_font(fonts.value_family, config.value_font_size)
    surface.fill_text(value, center_x, box.y + box.h / VALUE_Y_DIVISOR)

    surface.set_font(fonts.label_family, config.label_font_size)
    surface.fill_text(box.label, center_x, box.y + box.h * LABEL_Y_RATIO)


def paint_countdown_frame(
    surface: DrawingSurface,
    config: RenderConfig,
    values: tuple[str, str, str, str],
    fonts: FontSpec | None = None,
) -> None:
    fonts = fonts or FontSpec()
    for box, value in zip(compute_box_layout(config), values):
        draw_box(surface, config, box, value, fonts)


def paint_passed_frame(
    surface: DrawingSurface,
    config: RenderConfig,
    message: str,
    fonts: FontSpec | None = None,
) -> None:
    fonts = fonts or FontSpec()
    surface.fill_style = config.background_color
    surface.fill_rect(0, 0, config.width, config.height)

    surface.set_font(fonts.passed_family, config.passed_font_size)
    surface.text_align = "center"
    surface.text_baseline = "middle"
    surface.fill_style = config.text_color
    surface.fill_text(message, config.half_width, config.half_height)
