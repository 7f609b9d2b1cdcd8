from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

DEFAULT_LOG_PATH = "debug.log"

LOGGER_NAME = "nvchad_installer"


class LogLineFormatter(logging.Formatter):
    """``[<ISO-8601 UTC>] <message>``, with ``ERROR: `` before error messages."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        prefix = "ERROR: " if record.levelno >= logging.ERROR else ""
        line = f"[{self.formatTime(record)}] {prefix}{record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class _BelowLevel(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure the installer logger.

    Every record is appended to ``log_path`` through a single file handle
    owned by this logger. Console output mirrors the bare message: records
    below ERROR go to stdout, errors to stderr.

    Unlike a best-effort log, an unwritable ``log_path`` is fatal: the
    ``OSError`` from opening the file propagates to the caller.

    Returns the file path being used.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_nvchad_configured", False):
        return getattr(logger, "_nvchad_log_path", log_path)

    handlers: list[logging.Handler] = []

    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(LogLineFormatter())
    handlers.append(file_handler)

    if also_console:
        bare = logging.Formatter("%(message)s")

        out = logging.StreamHandler(sys.stdout)
        out.setFormatter(bare)
        out.addFilter(_BelowLevel(logging.ERROR))
        handlers.append(out)

        err = logging.StreamHandler(sys.stderr)
        err.setFormatter(bare)
        err.setLevel(logging.ERROR)
        handlers.append(err)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_nvchad_configured", True)
    setattr(logger, "_nvchad_log_path", log_path)
    setattr(logger, "_nvchad_handlers", handlers)

    logging.getLogger(__name__).debug("Logging initialized (path=%s)", log_path)
    return log_path


def shutdown_logging() -> None:
    """Flush, close and detach the handlers installed by configure_logging()."""

    logger = logging.getLogger(LOGGER_NAME)
    for h in getattr(logger, "_nvchad_handlers", []):
        try:
            h.flush()
        finally:
            logger.removeHandler(h)
            h.close()

    setattr(logger, "_nvchad_configured", False)
    setattr(logger, "_nvchad_handlers", [])
