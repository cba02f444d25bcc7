"""
Notifier Trace — Sinks
========================
Append-only destinations for trace lines.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol, Union


class TraceSink(Protocol):
    """Receives one formatted trace line per dispatch."""

    def write(self, line: str) -> None:
        ...  # pragma: no cover


class FileTraceSink:
    """Appends lines to a text file. The directory must already exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def write(self, line: str) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")


class LoggerTraceSink:
    """Forwards lines to a logger at INFO."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("notifier.trace")

    def write(self, line: str) -> None:
        self.logger.info(line)
