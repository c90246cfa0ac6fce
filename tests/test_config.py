from __future__ import annotations

import pytest

from vendor_console_sdk.config import ConfigError, load_config

_VARS = (
    "VENDOR_CONSOLE_ENV",
    "VENDOR_CONSOLE_API_BASE_URL",
    "VENDOR_CONSOLE_API_BASE_URL_DEV",
    "VENDOR_CONSOLE_API_BASE_URL_STAGING",
    "VENDOR_CONSOLE_TIMEOUT_SECONDS",
    "VENDOR_CONSOLE_CONNECT_TIMEOUT_SECONDS",
    "VENDOR_CONSOLE_READ_TIMEOUT_SECONDS",
    "VENDOR_CONSOLE_RETRIES",
    "VENDOR_CONSOLE_RETRY_BACKOFF_SECONDS",
    "VENDOR_CONSOLE_MAX_CONNECTIONS",
    "VENDOR_CONSOLE_PAGE_SIZE",
    "VENDOR_CONSOLE_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _VARS:
        # setenv first so values loaded from a .env file are undone at teardown.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a developer's .env out of the picture.
    monkeypatch.chdir(tmp_path)


def test_load_config_requires_base_url() -> None:
    with pytest.raises(ConfigError, match="VENDOR_CONSOLE_API_BASE_URL"):
        load_config()


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL", "https://api.example.com/")
    cfg = load_config()
    assert cfg.env_name == "dev"
    assert cfg.api_base_url == "https://api.example.com"
    assert cfg.retries == 0
    assert cfg.page_size == 5
    assert cfg.verify_ssl is True


def test_load_config_profile(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VENDOR_CONSOLE_ENV", "staging")
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL_STAGING", "https://staging.example.com")
    cfg = load_config()
    assert cfg.api_base_url == "https://staging.example.com"
    assert cfg.normalized_env == "staging"


def test_load_config_reads_env_file(tmp_path) -> None:
    env_file = tmp_path / "console.env"
    env_file.write_text("VENDOR_CONSOLE_API_BASE_URL=https://file.example.com\nVENDOR_CONSOLE_PAGE_SIZE=10\n")
    cfg = load_config(str(env_file))
    assert cfg.api_base_url == "https://file.example.com"
    assert cfg.page_size == 10


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("VENDOR_CONSOLE_TIMEOUT_SECONDS", "0"),
        ("VENDOR_CONSOLE_CONNECT_TIMEOUT_SECONDS", "0"),
        ("VENDOR_CONSOLE_READ_TIMEOUT_SECONDS", "0"),
        ("VENDOR_CONSOLE_RETRIES", "-1"),
        ("VENDOR_CONSOLE_RETRY_BACKOFF_SECONDS", "-0.1"),
        ("VENDOR_CONSOLE_MAX_CONNECTIONS", "0"),
        ("VENDOR_CONSOLE_PAGE_SIZE", "0"),
        ("VENDOR_CONSOLE_RETRIES", "two"),
    ],
)
def test_load_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError, match=key):
        load_config()


@pytest.mark.parametrize(("raw", "expected"), [("false", False), ("0", False), ("yes", True), ("TRUE", True)])
def test_verify_ssl_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("VENDOR_CONSOLE_VERIFY_SSL", raw)
    assert load_config().verify_ssl is expected


def test_invalid_number_message_names_variable_and_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("VENDOR_CONSOLE_PAGE_SIZE", "ten")
    with pytest.raises(ConfigError, match=r"Invalid VENDOR_CONSOLE_PAGE_SIZE: expected int, got 'ten'"):
        load_config()


def test_timeouts_cascade_from_overall_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VENDOR_CONSOLE_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("VENDOR_CONSOLE_TIMEOUT_SECONDS", "3")
    cfg = load_config()
    assert cfg.connect_timeout_seconds == 3.0
    assert cfg.read_timeout_seconds == 3.0
