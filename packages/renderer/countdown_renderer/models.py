"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    width: int
    height: int
    frame_count: int
    background_color: str
    text_color: str
    artifact_name: str
    title: str

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def value_font_size(self) -> int:
        return self.width // 10

    @property
    def label_font_size(self) -> int:
        return self.width // 28

    @property
    def passed_font_size(self) -> int:
        return self.width // 12


@dataclass(frozen=True)
class FontSpec:
    value_family: str = "Open Sans"
    label_family: str = "Open Sans"
    passed_family: str = "Courier New"


@dataclass(frozen=True)
class Box:
    label: str
    x: int
    y: int
    w: int
    h: int
