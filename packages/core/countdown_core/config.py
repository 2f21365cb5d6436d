"""Persistent render defaults schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
CONFIG_ENV = "COUNTDOWN_GIF_CONFIG"
DEFAULT_TRANSPARENT = "ff00ff"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_HEX_KEY = re.compile(r"^[0-9a-f]{6}$")


@dataclass
class RenderDefaultsConfig:
    width: int = 200
    height: int = 80
    frames: int = 30
    text_color: str = "000000"
    background_color: str = "ffffff"
    name: str = "default"
    title: str = "Countdown!"


@dataclass
class EncoderConfig:
    delay_ms: int = 1000
    repeat: int = 0
    quality: int = 10
    transparent: str | None = DEFAULT_TRANSPARENT


@dataclass
class OutputConfig:
    directory: str | None = None


@dataclass
class FontConfig:
    value_family: str = "Open Sans"
    label_family: str = "Open Sans"
    passed_family: str = "Courier New"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str | None = None


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderDefaultsConfig = field(default_factory=RenderDefaultsConfig)
    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    fonts: FontConfig = field(default_factory=FontConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "CountdownGif"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "CountdownGif"
    return Path.home() / ".config" / "countdown-gif"


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    # Range clamping happens per render; here only coerce types.
    cfg.render.width = int(cfg.render.width)
    cfg.render.height = int(cfg.render.height)
    cfg.render.frames = int(cfg.render.frames)
    cfg.render.text_color = str(cfg.render.text_color)
    cfg.render.background_color = str(cfg.render.background_color)


def _normalize_encoder(cfg: AppConfig) -> None:
    cfg.encoder.delay_ms = max(20, int(cfg.encoder.delay_ms))
    cfg.encoder.repeat = max(-1, int(cfg.encoder.repeat))
    cfg.encoder.quality = max(1, min(30, int(cfg.encoder.quality)))
    if cfg.encoder.transparent is not None:
        key = str(cfg.encoder.transparent).strip().lstrip("#").lower()
        if not key:
            cfg.encoder.transparent = None
        else:
            cfg.encoder.transparent = key if _HEX_KEY.match(key) else DEFAULT_TRANSPARENT


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in LOG_LEVELS else "INFO"
    cfg.logging.file = str(cfg.logging.file) if cfg.logging.file else None


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(raw.get("config_version", CONFIG_VERSION)),
        render=_merge(RenderDefaultsConfig, raw.get("render", {})),
        encoder=_merge(EncoderConfig, raw.get("encoder", {})),
        output=_merge(OutputConfig, raw.get("output", {})),
        fonts=_merge(FontConfig, raw.get("fonts", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_render(cfg)
    _normalize_encoder(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def default_output_dir(cfg: AppConfig | None = None) -> Path:
    if cfg is not None and cfg.output.directory:
        return Path(cfg.output.directory).expanduser()
    return Path.cwd() / "tmp"
