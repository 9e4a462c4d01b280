"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from app.config import Settings
from app.infrastructure.logging.log_config import _CATEGORY_MAP, setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_max_upload_bytes_derived_from_megabytes():
    settings = Settings(_env_file=None, max_upload_size_mb=2)
    assert settings.max_upload_bytes == 2 * 1024 * 1024


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("DEFAULT_UPLOADER_NAME", "Equipe de medição")

    settings = Settings(_env_file=None)

    assert settings.seed_sample_data is False
    assert settings.default_uploader_name == "Equipe de medição"


def test_setup_logging_applies_category_levels():
    settings = Settings(_env_file=None, log_level_store="DEBUG", log_level_uploads="ERROR")

    setup_logging(settings)

    assert logging.getLogger("app.infrastructure.memory").level == logging.DEBUG
    assert logging.getLogger("app.application.services.upload_progress").level == logging.ERROR
    categorised = {name for names in _CATEGORY_MAP.values() for name in names}
    assert "httpx" not in categorised
    assert not hasattr(settings, "log_level_http")
