"""Output path setup and background artifact writing."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Callable

from countdown_encoder import ByteStream

logger = logging.getLogger("countdown.output")

ARTIFACT_SUFFIX = ".gif"


def output_path(output_dir: Path, name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir / f"{name}{ARTIFACT_SUFFIX}"


class ArtifactWriter:
    """Pipes an encoder stream to disk; ``on_finish`` fires once after the file is closed."""

    def __init__(self, stream: ByteStream, path: Path, on_finish: Callable[[], None] | None = None) -> None:
        self.stream = stream
        self.path = path
        self.on_finish = on_finish
        self.future: Future[Path] = Future()
        self._thread = threading.Thread(target=self._run, name=f"artifact-writer:{path.name}", daemon=True)

    def start(self) -> "ArtifactWriter":
        self.future.set_running_or_notify_cancel()
        self._thread.start()
        return self

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def _run(self) -> None:
        try:
            with self.path.open("wb") as fh:
                for chunk in self.stream:
                    fh.write(chunk)
        except Exception as exc:
            logger.error(f"artifact write failed: {self.path}", exc_info=True, extra={"event": "write_failed"})
            self.future.set_exception(exc)
            return

        logger.info(f"artifact written: {self.path}", extra={"event": "artifact_written", "path": str(self.path)})
        # The callback runs before waiters on the future are released.
        try:
            if callable(self.on_finish):
                self.on_finish()
        finally:
            self.future.set_result(self.path)
