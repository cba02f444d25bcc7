"""
Notifier Django — App Configuration
=====================================
Reads NOTIFIER_* settings once Django has loaded and installs the
process-wide trace and alias defaults.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger("notifier.django")


def settings_mapping() -> dict:
    """NOTIFIER_* (and legacy DIR_FS_LOGS) Django settings as a plain dict."""
    return {
        name: getattr(settings, name)
        for name in dir(settings)
        if name.startswith("NOTIFIER_") or name == "DIR_FS_LOGS"
    }


class NotifierConfig(AppConfig):
    name = "adapters.django_notifier"
    label = "django_notifier"
    verbose_name = "Notifier"

    def ready(self):
        from notifier.bootstrap import configure
        from notifier.config import NotifierSettings

        notifier_settings = NotifierSettings.from_mapping(settings_mapping())
        configure(notifier_settings)
        logger.info(
            f"Notifier wired from Django settings "
            f"(trace={notifier_settings.trace_mode.value})."
        )
