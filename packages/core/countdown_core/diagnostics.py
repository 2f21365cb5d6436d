"""Environment report for the ``doctor`` command."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from importlib import metadata
from typing import Any

from countdown_renderer.surface import font_path

from .config import AppConfig, config_path, default_output_dir


def _version(dist: str) -> str | None:
    try:
        return metadata.version(dist)
    except metadata.PackageNotFoundError:
        return None


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    families = {
        "value": cfg.fonts.value_family,
        "label": cfg.fonts.label_family,
        "passed": cfg.fonts.passed_family,
    }
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "libraries": {
            "pillow": _version("Pillow"),
            "numpy": _version("numpy"),
        },
        "config_path": str(config_path()),
        "output_dir": str(default_output_dir(cfg)),
        "fonts": {
            role: {"family": family, "path": font_path(family)}
            for role, family in families.items()
        },
        "config": asdict(cfg),
    }
