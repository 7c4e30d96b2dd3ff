"""Configuration loading from environment and YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from client_app.config import DEFAULT_BACKEND_URL, ClientConfig

_ENV_KEYS = [
    "MAZZURA_BACKEND_URL",
    "VITE_BACKEND_URL",
    "BACKEND_URL",
    "MAZZURA_REQUEST_TIMEOUT",
    "APP_ENV",
    "APP_CONFIG_PATH",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_to_localhost() -> None:
    config = ClientConfig.from_env()

    assert config.backend_url == DEFAULT_BACKEND_URL
    assert config.request_timeout is None
    assert config.log_level == "INFO"


def test_backend_url_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKEND_URL", "http://generic:9000")
    assert ClientConfig.from_env().backend_url == "http://generic:9000"

    monkeypatch.setenv("VITE_BACKEND_URL", "http://vite:5173/")
    assert ClientConfig.from_env().backend_url == "http://vite:5173"

    monkeypatch.setenv("MAZZURA_BACKEND_URL", "https://api.mazzura.app")
    assert ClientConfig.from_env().backend_url == "https://api.mazzura.app"


@pytest.mark.parametrize("raw, expected", [("2.5", 2.5), ("", None), ("abc", None), ("0", None), ("-1", None)])
def test_request_timeout_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected) -> None:
    monkeypatch.setenv("MAZZURA_REQUEST_TIMEOUT", raw)
    assert ClientConfig.from_env().request_timeout == expected


def test_yaml_config_is_merged_under_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "staging.yaml"
    path.write_text(
        "# staging\n"
        "mazzura_backend_url: \"https://staging.mazzura.app\"\n"
        "log_level: DEBUG\n"
    )
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))
    monkeypatch.setenv("APP_ENV", "staging")

    config = ClientConfig.from_env()
    assert config.backend_url == "https://staging.mazzura.app"
    assert config.log_level == "DEBUG"
    assert config.environment == "staging"

    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert ClientConfig.from_env().log_level == "WARNING"
