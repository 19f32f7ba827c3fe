"""
Unit tests for Settings defaults, environment overrides and validation.
"""

import pytest
from pydantic import ValidationError

from profile_api.core.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("PROFILE_API_PORT", "PROFILE_API_HOST", "PROFILE_API_TIMEZONE", "PROFILE_API_API_PREFIX"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.api_prefix == "/api"
        assert settings.timezone == "UTC"
        assert settings.docs_enabled is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PROFILE_API_PORT", "9000")
        monkeypatch.setenv("PROFILE_API_TIMEZONE", "America/New_York")
        settings = Settings(_env_file=None)
        assert settings.port == 9000
        assert settings.timezone == "America/New_York"

    def test_log_level_is_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_rejects_unknown_timezone(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, timezone="Mars/Olympus_Mons")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_out_of_range_port(self, port):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, port=port)

    def test_api_prefix_trailing_slash_is_stripped(self):
        assert Settings(_env_file=None, api_prefix="/v1/").api_prefix == "/v1"

    def test_api_prefix_must_be_absolute(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, api_prefix="api")
