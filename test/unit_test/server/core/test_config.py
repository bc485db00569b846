"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds the SAMPLING_GATE_* environment
variables documented in .env.example.
"""

from pathlib import Path

import pytest
from dotenv import dotenv_values

from sampling_gate.server.core.config import CORSConfig, Settings

ENV_PREFIX = "SAMPLING_GATE_"


@pytest.fixture
def env_example_vars() -> dict:
    """Parse the .env.example file at the repository root."""
    path = Path(__file__).resolve().parents[4] / ".env.example"
    return dotenv_values(path)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in list(Settings.model_fields):
        alias = Settings.model_fields[name].alias
        if alias:
            monkeypatch.delenv(alias, raising=False)


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_example_file_documents_every_setting(self, env_example_vars: dict):
        aliases = {field.alias for field in Settings.model_fields.values()}
        assert aliases <= set(env_example_vars)

    def test_server_host_binding(self, env_example_vars: dict, monkeypatch):
        monkeypatch.setenv("SAMPLING_GATE_SERVER_HOST", env_example_vars["SAMPLING_GATE_SERVER_HOST"])

        settings = Settings(_env_file=None)
        assert settings.server_host == env_example_vars["SAMPLING_GATE_SERVER_HOST"]

    def test_server_port_binding(self, monkeypatch):
        monkeypatch.setenv("SAMPLING_GATE_SERVER_PORT", "9001")

        settings = Settings(_env_file=None)
        assert settings.server_port == 9001

    def test_secret_key_binding(self, monkeypatch):
        monkeypatch.setenv("SAMPLING_GATE_SECRET_KEY", "s3cret")

        settings = Settings(_env_file=None)
        assert settings.secret_key.get_secret_value() == "s3cret"
        assert "s3cret" not in repr(settings)

    def test_model_binding(self, env_example_vars: dict, monkeypatch):
        monkeypatch.setenv("SAMPLING_GATE_MODEL", env_example_vars["SAMPLING_GATE_MODEL"])

        settings = Settings(_env_file=None)
        assert settings.model == "openai:gpt-4o"

    def test_logging_binding(self, monkeypatch):
        monkeypatch.setenv("SAMPLING_GATE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SAMPLING_GATE_LOG_FORMAT", "json")
        monkeypatch.setenv("SAMPLING_GATE_ENABLE_FILE_LOGGING", "true")

        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.enable_file_logging is True

    def test_env_file_is_read(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("SAMPLING_GATE_SERVER_PORT=7000\nSAMPLING_GATE_MODEL=test\n")

        settings = Settings(_env_file=env_file)
        assert settings.server_port == 7000
        assert settings.model == "test"


class TestSettingsDefaults:
    """Test Settings model default values."""

    def test_server_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 8000
        assert settings.secret_key is None
        assert settings.model is None

    def test_logging_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "detailed"
        assert settings.enable_file_logging is False

    def test_cors_defaults(self):
        cors_config = Settings(_env_file=None).cors

        assert isinstance(cors_config, CORSConfig)
        assert cors_config.origins == ["*"]
        assert cors_config.allow_credentials is True
        assert cors_config.allow_methods == ["*"]
        assert cors_config.allow_headers == ["*"]
