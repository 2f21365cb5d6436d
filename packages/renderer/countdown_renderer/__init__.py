"""Renderer package: parameter normalization, box layout, and frame painting."""

from .layout import UNIT_LABELS, compute_box_layout
from .models import Box, FontSpec, RenderConfig
from .normalize import build_render_config, clamp, normalize, normalize_color, safe_name
from .painter import paint_countdown_frame, paint_passed_frame
from .surface import DrawingSurface, resolve_font

__all__ = [
    "Box",
    "DrawingSurface",
    "FontSpec",
    "RenderConfig",
    "UNIT_LABELS",
    "build_render_config",
    "clamp",
    "compute_box_layout",
    "normalize",
    "normalize_color",
    "paint_countdown_frame",
    "paint_passed_frame",
    "resolve_font",
    "safe_name",
]
