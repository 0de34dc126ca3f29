"""Sinks that receive rendered request entries.

``LineSink`` writes to a stream (stdout by default) and, if configured, an
append-only log file. Formatting conventions:
  * The first line of each entry carries an optional UTC timestamp prefix
  * Continuation lines are written as-is so JSON blocks stay aligned
  * ``framed=True`` wraps every entry in HLINE rules

``logging_sink`` forwards entries to the standard ``logging`` module instead.
"""
from __future__ import annotations
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from typing import Callable, Optional, TextIO

HLINE = '-' * 80
DEFAULT_LOGGER_NAME = 'fauna'

def _now() -> str:
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')

def setup_logging_from_env(default_level: str = 'DEBUG') -> None:
    """Configure root logging from ``FAUNA_LOG_LEVEL``.

    Safe to call multiple times; ``basicConfig`` is a no-op once handlers exist.
    """
    level = os.getenv('FAUNA_LOG_LEVEL', default_level).upper()
    logging.basicConfig(level=level, format='%(message)s')

class LineSink:
    """Thread-safe sink writing each entry to a stream and optional log file."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        log_file: str | None = None,
        with_time: bool = True,
        framed: bool = False,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.with_time = with_time
        self.framed = framed
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        if log_file:
            self._file = open(log_file, 'a', encoding='utf-8')

    def __call__(self, entry: str) -> None:
        text = self._render(entry)
        with self._lock:
            self._write(self.stream, text)
            if self._file is not None:
                self._write(self._file, text)

    def _render(self, entry: str) -> str:
        if self.with_time and entry:
            entry = f'[{_now()}] {entry}'
        if self.framed:
            entry = f'{HLINE}\n{entry}\n{HLINE}'
        return entry + '\n'

    @staticmethod
    def _write(target: TextIO, text: str) -> None:
        target.write(text)
        target.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> 'LineSink':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

def logging_sink(
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Callable[[str], None]:
    """Return a sink that emits each entry as one record on ``logger``."""
    log = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    def emit(entry: str) -> None:
        log.log(level, entry)
    return emit
