from __future__ import annotations

import pytest

from pyrobots.config import RobotsConfig
from pyrobots.exceptions import RobotsConfigError


def test_defaults() -> None:
    config = RobotsConfig()
    assert config.base_url == "http://localhost:4000"
    assert config.resource_path == "/robots"
    assert config.request_timeout is None
    assert config.verify_ssl is True


def test_base_url_and_path_are_normalised() -> None:
    config = RobotsConfig(base_url="https://robots.example.com/api/", resource_path="robots/")
    assert config.base_url == "https://robots.example.com/api"
    assert config.resource_path == "/robots"
    assert config.robot_path() == "/robots"
    assert config.robot_path("1") == "/robots/1"


def test_robot_path_quotes_identifier() -> None:
    assert RobotsConfig().robot_path("a/b c") == "/robots/a%2Fb%20c"


def test_empty_base_url_is_rejected() -> None:
    with pytest.raises(RobotsConfigError):
        RobotsConfig(base_url=" / ")


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(RobotsConfigError):
        RobotsConfig(request_timeout=0)


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROBOTS_BASE_URL", "https://robots.example.com")
    monkeypatch.setenv("ROBOTS_RESOURCE_PATH", "/v2/robots")
    monkeypatch.setenv("ROBOTS_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("ROBOTS_VERIFY_SSL", "no")

    config = RobotsConfig.from_env()

    assert config.base_url == "https://robots.example.com"
    assert config.resource_path == "/v2/robots"
    assert config.request_timeout == 2.5
    assert config.verify_ssl is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROBOTS_BASE_URL", "https://robots.example.com")
    monkeypatch.setenv("ROBOTS_VERIFY_SSL", "0")

    config = RobotsConfig.from_env(base_url="http://127.0.0.1:9000", verify_ssl=True)

    assert config.base_url == "http://127.0.0.1:9000"
    assert config.verify_ssl is True


def test_from_env_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROBOTS_REQUEST_TIMEOUT", "soon")
    with pytest.raises(RobotsConfigError):
        RobotsConfig.from_env()
