"""Countdown GIF generation entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable

from countdown_encoder import GifSequenceEncoder
from countdown_renderer import DrawingSurface, FontSpec, build_render_config
from countdown_timing import compute_initial, parse_target

from .config import AppConfig, default_output_dir
from .driver import FrameSequenceDriver, RenderReport
from .output import ArtifactWriter, output_path

logger = logging.getLogger("countdown.generator")


@dataclass
class RenderJob:
    path: Path
    report: RenderReport
    writer: ArtifactWriter

    @property
    def future(self):
        return self.writer.future

    def wait(self, timeout: float | None = None) -> Path:
        return self.writer.future.result(timeout)


def _build_encoder(width: int, height: int, settings: AppConfig) -> GifSequenceEncoder:
    encoder = GifSequenceEncoder(width, height)
    encoder.start()
    encoder.set_repeat(settings.encoder.repeat)
    encoder.set_delay(settings.encoder.delay_ms)
    encoder.set_quality(settings.encoder.quality)
    encoder.set_transparent(settings.encoder.transparent)
    return encoder


def generate(
    time: str | datetime,
    width: int = 200,
    height: int = 80,
    color: str = "000000",
    bg: str = "ffffff",
    name: str = "default",
    title: str = "Countdown!",
    frames: int = 30,
    callback: Callable[[], None] | None = None,
    *,
    output_dir: Path | None = None,
    now: datetime | None = None,
    settings: AppConfig | None = None,
) -> RenderJob:
    """Render a countdown to ``time`` as ``<output_dir>/<name>.gif``.

    Rendering is synchronous; writing the encoded bytes to disk happens on a
    background thread. ``callback`` runs once, after the file is closed, and
    only if the write succeeded.
    """
    settings = settings or AppConfig()
    config = build_render_config(
        width=width,
        height=height,
        frame_count=frames,
        text_color=color,
        background_color=bg,
        name=name,
        title=title,
    )

    target = time if isinstance(time, datetime) else parse_target(time)
    if target.tzinfo is None:
        target = target.astimezone()
    current = now or datetime.now()
    if current.tzinfo is None:
        current = current.astimezone()
    countdown = compute_initial(target, current)

    path = output_path(Path(output_dir) if output_dir else default_output_dir(settings), config.artifact_name)
    encoder = _build_encoder(config.width, config.height, settings)
    writer = ArtifactWriter(encoder.create_read_stream(), path, on_finish=callback).start()

    fonts = FontSpec(
        value_family=settings.fonts.value_family,
        label_family=settings.fonts.label_family,
        passed_family=settings.fonts.passed_family,
    )
    surface = DrawingSurface(config.width, config.height, background=config.background_color)
    logger.info(
        f"rendering {config.artifact_name} {config.width}x{config.height} target={target.isoformat()}",
        extra={"event": "render_start", "artifact": config.artifact_name, "frames": config.frame_count},
    )
    try:
        report = FrameSequenceDriver(config, surface, encoder, fonts).run(countdown)
    except Exception as exc:
        encoder.create_read_stream().fail(exc)
        raise
    return RenderJob(path=path, report=report, writer=writer)
