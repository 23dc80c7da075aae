"""
PassGauge Structured Logger
===========================

Provides :class:`GaugeLogger`, the logging facade used by the engine. It
writes Rich-formatted records to stderr and, when a log file is
configured, plain-text or JSON lines to a rotating file.

Every record carries the component name and the active operation
(``analyze``, ``generate``). Records never carry password text; callers
log lengths, scores and detector counts only.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_FILE_MAX_BYTES = 1_048_576
_FILE_BACKUPS = 3
_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(component)s | %(operation)s | %(message)s"


class _JSONFormatter(logging.Formatter):
    """One JSON object per record::

        {"timestamp": "...", "level": "INFO", "component": "gauge.engine",
         "operation": "analyze", "message": "Analysed password: length=10 ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "component": getattr(record, "component", record.name),
            "operation": getattr(record, "operation", None),
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _stderr_handler(level: int) -> logging.Handler:
    return RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        level=level,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(path: Path, level: int, json_logs: bool) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=_FILE_MAX_BYTES,
        backupCount=_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(_JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(fmt=_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
        )
    return handler


class GaugeLogger:
    """Component logger with an operation scope.

    Usage::

        log = GaugeLogger("gauge.engine", log_file="gauge.log", json_logs=True)
        with log.operation("generate"):
            log.info("Generated password: length=%d", 16)

    Args:
        component: Name of the component, e.g. ``"gauge.engine"``.
        log_level: Minimum severity for both handlers.
        log_file:  Rotating log file path; ``None`` disables file logging.
        json_logs: Write JSON lines instead of plain text to the file.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        level = getattr(logging, log_level.upper(), logging.WARNING)
        self._logger = logging.getLogger(f"passgauge.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Engines may be recreated per CLI invocation
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        self._logger.addHandler(_stderr_handler(level))
        if log_file is not None:
            self._logger.addHandler(_file_handler(Path(log_file), level, json_logs))

    @contextmanager
    def operation(self, name: str) -> Iterator[GaugeLogger]:
        """Tag records logged inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG on entry and again with the elapsed time."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.debug(
                "Completed: %s (%.3f ms)",
                label,
                (time.perf_counter() - start) * 1000,
            )

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...]) -> None:
        self._logger.log(
            level,
            msg,
            *args,
            extra={"component": self._component, "operation": self._operation or "-"},
        )

    def debug(self, msg: str, *args: Any) -> None:
        self._log(logging.DEBUG, msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._log(logging.INFO, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._log(logging.ERROR, msg, args)
