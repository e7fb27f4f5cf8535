"""
Tests for startup configuration loading.
"""
import pytest
from pydantic import ValidationError

import main
from aura_backend.config.settings import ConfigurationError, load_settings

REQUIRED_ENV = {
    "ARCADE_API_KEY": "arcade-key",
    "GOOGLE_CLIENT_ID": "client-id",
    "GOOGLE_API_KEY": "google-key",
}


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Environment with all required variables set and no .env files in reach."""
    monkeypatch.chdir(tmp_path)
    for name, value in REQUIRED_ENV.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    return monkeypatch


def test_load_settings_from_environment(clean_env):
    settings = load_settings()

    assert settings.arcade_api_key == "arcade-key"
    assert settings.google_client_id == "client-id"
    assert settings.google_api_key == "google-key"
    assert settings.gemini_api_key == ""
    assert settings.upstream_timeout_seconds == 30.0


def test_settings_are_immutable(clean_env):
    settings = load_settings()

    with pytest.raises(ValidationError):
        settings.arcade_api_key = "changed"


@pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
def test_missing_variable_is_fatal(clean_env, missing):
    clean_env.delenv(missing)

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()
    assert missing in str(exc_info.value)


def test_empty_variable_counts_as_missing(clean_env):
    clean_env.setenv("GOOGLE_API_KEY", "")

    with pytest.raises(ConfigurationError, match="GOOGLE_API_KEY"):
        load_settings()


def test_env_file_is_read(clean_env, tmp_path):
    clean_env.delenv("ARCADE_API_KEY")
    env_file = tmp_path / "custom.env"
    env_file.write_text("ARCADE_API_KEY=from-file\n")

    assert load_settings(env_file=str(env_file)).arcade_api_key == "from-file"


def test_build_app_exits_when_config_missing(clean_env):
    clean_env.delenv("ARCADE_API_KEY")

    with pytest.raises(SystemExit) as exc_info:
        main.build_app()
    assert exc_info.value.code == 1


def test_build_app_with_config(clean_env):
    app = main.build_app()
    assert app.state.settings.google_client_id == "client-id"
