"""
Tests — Django Notifier Adapter
=================================
Settings → notifier defaults, request → page context.
"""

from __future__ import annotations

from django.apps import apps
from django.http import HttpResponse

import pytest

from adapters.django_notifier.apps import settings_mapping
from adapters.django_notifier.middleware import PageContextMiddleware, page_for_request
from notifier.context.page import current_page
from notifier.events.aliases import get_default_aliases, set_default_aliases
from notifier.trace.modes import TraceMode
from notifier.trace.recorder import get_default_trace, set_default_trace
from notifier.trace.sinks import FileTraceSink


@pytest.fixture
def restore_defaults():
    trace = get_default_trace()
    aliases = get_default_aliases()
    yield
    set_default_trace(trace)
    set_default_aliases(aliases)


# ══════════════════════════════════════════════════════════════
# PAGE RESOLUTION
# ══════════════════════════════════════════════════════════════

class TestPageForRequest:
    def test_home_page(self, rf):
        assert page_for_request(rf.get("/")) == "index-home"

    def test_main_page_query(self, rf):
        assert page_for_request(rf.get("/index", {"main_page": "shopping_cart"})) == (
            "shopping_cart"
        )

    def test_no_main_page(self, rf):
        assert page_for_request(rf.get("/index")) == ""

    def test_admin_script(self, rf):
        assert page_for_request(rf.get("/admin/orders/")) == "orders"

    def test_custom_admin_prefix(self, rf, settings):
        settings.NOTIFIER_ADMIN_PREFIX = "/backoffice/"
        assert page_for_request(rf.get("/backoffice/customers")) == "customers"
        assert page_for_request(rf.get("/admin/orders", {"main_page": "x"})) == "x"


class TestPageContextMiddleware:
    def test_sets_page_during_request(self, rf):
        seen = []

        def view(request):
            seen.append(current_page())
            return HttpResponse("ok")

        middleware = PageContextMiddleware(view)
        response = middleware(rf.get("/", {"main_page": "ignored"}))

        assert response.status_code == 200
        assert seen == ["index-home"]
        assert current_page() == ""

    def test_resets_after_view_error(self, rf):
        def view(request):
            raise RuntimeError("view failed")

        middleware = PageContextMiddleware(view)
        with pytest.raises(RuntimeError):
            middleware(rf.get("/index", {"main_page": "checkout"}))
        assert current_page() == ""


# ══════════════════════════════════════════════════════════════
# APP WIRING
# ══════════════════════════════════════════════════════════════

class TestNotifierConfig:
    def test_app_installed(self):
        assert apps.get_app_config("django_notifier").verbose_name == "Notifier"

    def test_settings_mapping_reads_notifier_keys(self, settings):
        settings.NOTIFIER_TRACE = "print_r"
        mapping = settings_mapping()
        assert mapping["NOTIFIER_TRACE"] == "print_r"
        assert "SECRET_KEY" not in mapping

    def test_ready_configures_defaults(self, settings, tmp_path, restore_defaults):
        settings.NOTIFIER_TRACE = "var_export"
        settings.NOTIFIER_LOG_DIR = str(tmp_path)
        settings.NOTIFIER_ALIASES = {"OLD_EVT": "NEW_EVT"}

        apps.get_app_config("django_notifier").ready()

        trace = get_default_trace()
        assert trace.mode is TraceMode.VAR_EXPORT
        assert isinstance(trace.sink, FileTraceSink)
        assert trace.sink.path == tmp_path / "notifier_trace.log"
        assert get_default_aliases().has_alias("NEW_EVT")
