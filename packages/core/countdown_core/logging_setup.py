"""Logging for one-shot renders: stderr console plus an optional JSON-lines file."""

from __future__ import annotations

import json
import logging
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "countdown"

# Extra fields a record may carry; only these reach the JSON output.
RENDER_FIELDS = ("event", "artifact", "frames", "passed", "bytes", "path")

_OWNED = "_countdown_handler"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in RENDER_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _own(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED, True)
    return handler


def configure_logging(
    level: str | int = "INFO",
    log_file: Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """(Re)configure the ``countdown`` logger.

    The console only shows warnings unless ``verbose``; the JSON file, when given,
    receives everything at ``level``. Calling again replaces earlier handlers.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose else level)

    console = _own(logging.StreamHandler(sys.stderr))
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _own(logging.FileHandler(log_file, encoding="utf-8"))
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(file_handler)
    return logger


def get_logger(area: str | None = None) -> logging.Logger:
    if area:
        return logging.getLogger(f"{_LOGGER_NAME}.{area}")
    return logging.getLogger(_LOGGER_NAME)


def install_excepthook() -> None:
    """Log uncaught errors, including ones on the artifact writer thread, then defer to the defaults."""
    logger = get_logger()

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        logger.critical("uncaught exception", exc_info=(exc_type, exc_value, exc_tb), extra={"event": "uncaught_exception"})
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        thread = args.thread.name if args.thread is not None else "?"
        logger.critical(
            f"uncaught exception in thread {thread}",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
            extra={"event": "thread_exception"},
        )
        threading.__excepthook__(args)

    sys.excepthook = _log_uncaught
    threading.excepthook = _thread_hook
