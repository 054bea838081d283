"""Logging setup for hosts that embed the coupon catalog.

The engine itself only emits through module loggers; this helper wires
them to the console plus ``catalog.log`` and ``errors.log`` under
``settings.LOG_DIR`` at ``settings.LOG_LEVEL`` unless told otherwise.
"""

from __future__ import annotations

import logging
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path

from coupon_catalog.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
CATALOG_LOG = "catalog.log"
ERRORS_LOG = "errors.log"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _rotating(path: Path, level: int, max_bytes: int, backups: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    return handler


def setup_logging(log_dir: str | Path | None = None, level: int | str | None = None) -> Path:
    """Attach console and rotating file handlers to the root logger.

    Returns the resolved log directory.
    """

    log_path = Path(log_dir if log_dir is not None else settings.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)
    resolved_level = _resolve_level(level)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        with suppress(Exception):  # pragma: no cover - best effort cleanup
            handler.close()
    root.setLevel(resolved_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        _rotating(log_path / CATALOG_LOG, resolved_level, 5_000_000, 5),
        _rotating(log_path / ERRORS_LOG, logging.WARNING, 2_000_000, 3),
    ]
    handlers[0].setLevel(resolved_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.info(
        "catalog logging ready level=%s dir=%s",
        logging.getLevelName(resolved_level),
        log_path.resolve(),
    )
    return log_path


__all__ = ["setup_logging"]
