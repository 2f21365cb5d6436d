"""Animated GIF sequence encoder built on Pillow."""

from __future__ import annotations

import logging
from io import BytesIO

import numpy as np
from PIL import GifImagePlugin, Image

from .stream import ByteStream

logger = logging.getLogger("countdown.encoder")

CHUNK_SIZE = 64 * 1024
MIN_QUALITY = 1
MAX_QUALITY = 30
MEDIANCUT_MAX_QUALITY = 10


def parse_color_key(value: int | str | None) -> tuple[int, int, int] | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = int(value.strip().lstrip("#"), 16)
    value = int(value) & 0xFFFFFF
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def find_palette_index(image: Image.Image, color: tuple[int, int, int]) -> int | None:
    palette = image.getpalette() or []
    if len(palette) < 3:
        return None
    entries = np.asarray(palette[: len(palette) - len(palette) % 3], dtype=np.uint8).reshape((-1, 3))
    matches = np.flatnonzero(np.all(entries == np.asarray(color, dtype=np.uint8), axis=1))
    if matches.size == 0:
        return None
    return int(matches[0])


class GifSequenceEncoder:
    """Collects frames between ``start`` and ``finish`` and emits one GIF."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.repeat = 0
        self.delay_ms = 100
        self.quality = 10
        self.transparent: tuple[int, int, int] | None = None
        self._frames: list[Image.Image] = []
        self._stream = ByteStream()
        self._started = False
        self._finished = False

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def create_read_stream(self) -> ByteStream:
        return self._stream

    def start(self) -> None:
        if self._finished:
            raise RuntimeError("encoder already finished")
        self._frames = []
        self._started = True

    def set_repeat(self, repeat: int) -> None:
        self.repeat = max(-1, int(repeat))

    def set_delay(self, delay_ms: int) -> None:
        self.delay_ms = max(0, int(delay_ms))

    def set_quality(self, quality: int) -> None:
        self.quality = max(MIN_QUALITY, min(MAX_QUALITY, int(quality)))

    def set_transparent(self, color: int | str | None) -> None:
        self.transparent = parse_color_key(color)

    def add_frame(self, frame) -> None:
        if not self._started or self._finished:
            raise RuntimeError("add_frame called outside start/finish")
        image = frame.snapshot() if hasattr(frame, "snapshot") else frame.copy()
        if image.size != (self.width, self.height):
            raise ValueError(f"frame size {image.size} does not match {self.width}x{self.height}")
        self._frames.append(self._quantize(image))

    def _quantize(self, image: Image.Image) -> Image.Image:
        method = Image.Quantize.MEDIANCUT if self.quality <= MEDIANCUT_MAX_QUALITY else Image.Quantize.FASTOCTREE
        indexed = image.convert("RGB").quantize(colors=256, method=method, dither=Image.Dither.NONE)
        if self.transparent is not None:
            index = find_palette_index(indexed, self.transparent)
            if index is not None:
                indexed.info["transparency"] = index
        return indexed

    def encode(self) -> bytes:
        """Assemble the GIF with one image block per added frame.

        ``Image.save(save_all=True)`` folds identical consecutive frames into one,
        so frames are written individually, each with its own colour table.
        """
        if not self._frames:
            raise RuntimeError("no frames to encode")
        info: dict = {"duration": self.delay_ms}
        if self.repeat >= 0:
            info["loop"] = self.repeat

        buf = BytesIO()
        header, _ = GifImagePlugin.getheader(self._frames[0].copy(), info=info)
        for block in header:
            buf.write(block)
        for frame in self._frames:
            params: dict = {"duration": self.delay_ms, "include_color_table": True}
            if "transparency" in frame.info:
                params["transparency"] = frame.info["transparency"]
            for block in GifImagePlugin.getdata(frame, **params):
                buf.write(block)
        buf.write(b";")
        return buf.getvalue()

    def finish(self) -> None:
        if not self._started or self._finished:
            raise RuntimeError("finish called outside start")
        data = self.encode()
        self._finished = True
        self._frames = []
        logger.info(
            f"encoded {len(data)} bytes",
            extra={"event": "gif_encoded", "bytes": len(data)},
        )
        view = memoryview(data)
        for offset in range(0, len(data), CHUNK_SIZE):
            self._stream.write(view[offset : offset + CHUNK_SIZE])
        self._stream.close()
