"""
Notifier Config — Settings
============================
Host-supplied notifier configuration.

Settings are read once from the host (Django settings, environment,
a plain dict) and frozen. Recognized keys:

    NOTIFIER_TRACE            trace mode (see notifier.trace.modes)
    NOTIFIER_LOG_DIR          directory for the trace file
    DIR_FS_LOGS               legacy name for NOTIFIER_LOG_DIR
    NOTIFIER_TRACE_FILENAME   trace file name
    NOTIFIER_ALIASES          legacy → canonical event id mapping
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from notifier.events.aliases import DEFAULT_ALIASES
from notifier.trace.modes import TraceMode, parse_trace_mode

DEFAULT_TRACE_FILENAME = "notifier_trace.log"


@dataclass(frozen=True)
class NotifierSettings:
    trace_mode: TraceMode = TraceMode.OFF
    log_dir: Optional[Path] = None
    trace_filename: str = DEFAULT_TRACE_FILENAME
    aliases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_ALIASES))
    )

    def __post_init__(self) -> None:
        if not isinstance(self.trace_mode, TraceMode):
            raise ValueError(
                f"trace_mode must be a TraceMode, got {self.trace_mode!r}."
            )
        if not self.trace_filename or "/" in self.trace_filename:
            raise ValueError(
                f"trace_filename must be a bare file name, got "
                f"{self.trace_filename!r}."
            )
        if self.log_dir is not None and not isinstance(self.log_dir, Path):
            object.__setattr__(self, "log_dir", Path(self.log_dir))
        if not isinstance(self.aliases, MappingProxyType):
            object.__setattr__(
                self, "aliases", MappingProxyType(dict(self.aliases))
            )

    @property
    def trace_path(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / self.trace_filename

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "NotifierSettings":
        log_dir = source.get("NOTIFIER_LOG_DIR") or source.get("DIR_FS_LOGS")
        aliases = source.get("NOTIFIER_ALIASES")
        return cls(
            trace_mode=parse_trace_mode(source.get("NOTIFIER_TRACE")),
            log_dir=Path(log_dir) if log_dir else None,
            trace_filename=source.get("NOTIFIER_TRACE_FILENAME")
            or DEFAULT_TRACE_FILENAME,
            aliases=dict(DEFAULT_ALIASES) if aliases is None else dict(aliases),
        )
