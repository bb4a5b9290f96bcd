"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from bizdesk.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults(monkeypatch):
    for name in ("STORAGE_BACKEND", "SIMULATED_LATENCY_MS", "RAISE_ON_PERSISTENCE_ERROR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "json"
    assert settings.simulated_latency_ms == 0
    assert settings.raise_on_persistence_error is False


def test_latency_is_exposed_in_seconds():
    settings = Settings(simulated_latency_ms=250, _env_file=None)
    assert settings.simulated_latency == 0.25


def test_negative_latency_is_clamped():
    settings = Settings(simulated_latency_ms=-5, _env_file=None)
    assert settings.simulated_latency_ms == 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
    monkeypatch.setenv("RAISE_ON_PERSISTENCE_ERROR", "true")
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "sqlite"
    assert settings.raise_on_persistence_error is True


def test_unknown_backend_is_rejected():
    with pytest.raises(ValidationError):
        Settings(storage_backend="redis", _env_file=None)
