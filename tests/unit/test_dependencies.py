"""
Unit tests for request dependencies.
"""

from datetime import datetime
from types import SimpleNamespace
from zoneinfo import ZoneInfo

from profile_api.api.dependencies import get_today
from profile_api.core.config import Settings


def fake_request(settings):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(settings=settings)))


class TestGetToday:

    def test_uses_configured_timezone(self):
        settings = Settings(_env_file=None, timezone="Pacific/Kiritimati")
        before = datetime.now(ZoneInfo("Pacific/Kiritimati")).date()
        today = get_today(fake_request(settings))
        after = datetime.now(ZoneInfo("Pacific/Kiritimati")).date()
        assert before <= today <= after

    def test_defaults_to_utc(self):
        settings = Settings(_env_file=None, timezone="UTC")
        before = datetime.now(ZoneInfo("UTC")).date()
        today = get_today(fake_request(settings))
        assert before <= today <= datetime.now(ZoneInfo("UTC")).date()
