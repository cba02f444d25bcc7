"""
Notifier Bootstrap
====================
Installs process-wide defaults from NotifierSettings.

The observer registry is never replaced here: observers attached
before configure() keep receiving events.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from notifier.config.settings import NotifierSettings
from notifier.events.aliases import AliasTable, set_default_aliases
from notifier.time.clock import Clock
from notifier.trace.recorder import NotifierTrace, set_default_trace
from notifier.trace.sinks import FileTraceSink, LoggerTraceSink, TraceSink

logger = logging.getLogger("notifier.bootstrap")


def build_trace(
    settings: NotifierSettings,
    clock: Optional[Clock] = None,
    page_provider: Optional[Callable[[], str]] = None,
) -> NotifierTrace:
    """File sink when a log directory is configured, logger sink otherwise."""
    sink: TraceSink
    if settings.trace_path is not None:
        sink = FileTraceSink(settings.trace_path)
    else:
        sink = LoggerTraceSink()
    return NotifierTrace(
        settings.trace_mode, sink, clock=clock, page_provider=page_provider
    )


def configure(settings: NotifierSettings) -> NotifierTrace:
    trace = build_trace(settings)
    set_default_trace(trace)
    set_default_aliases(AliasTable(settings.aliases))
    logger.info(
        f"Notifier configured: trace={settings.trace_mode.value}, "
        f"sink={settings.trace_path or 'logger'}, "
        f"aliases={len(settings.aliases)}"
    )
    return trace
