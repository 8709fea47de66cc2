"""Tests for configuration settings."""
from dataclasses import replace

import pytest

from suomiarena.config import Settings, settings


def test_base_directories_exist():
    """Test that all required directories exist."""
    from suomiarena.config import BASE_DIR, DATA_DIR

    assert BASE_DIR.exists()
    assert DATA_DIR.exists()


def test_settings_from_test_env():
    """Test values loaded from .env.test."""
    assert settings.database.url == "sqlite://"
    assert settings.logging.level == "DEBUG"
    assert not settings.persistence.remote_enabled
    assert not settings.monitoring.enabled
    assert settings.paths.csv_file.parent == settings.paths.data_dir


def test_settings_defaults():
    """Test default game settings."""
    assert settings.game.memorise_max_required == 3
    assert settings.game.vocabulary_cycle_size == 20
    assert settings.persistence.api_base_url.endswith("/api")


@pytest.mark.parametrize(
    "section, field, value",
    [
        ("persistence", "storage_key", ""),
        ("persistence", "timeout", 0),
        ("game", "memorise_max_required", 0),
        ("game", "vocabulary_cycle_size", 0),
        ("server", "port", 70000),
    ],
)
def test_validate_rejects_bad_values(section, field, value):
    """Test that invalid settings are rejected."""
    test_settings = Settings()
    setattr(test_settings, section, replace(getattr(test_settings, section), **{field: value}))
    with pytest.raises(ValueError):
        test_settings.validate()


def test_validate_accepts_defaults():
    Settings().validate()
