from __future__ import annotations

import pytest
from pydantic import ValidationError

from postboard.shared.config import AppConfig, PaginationConfig, SecurityConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "JWT_SECRET",
        "TOKEN_TTL_SECONDS",
        "DEFAULT_PAGE_LIMIT",
        "MAX_PAGE_LIMIT",
        "APP_ENV",
    ):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.security.token_ttl_seconds == 24 * 60 * 60
    assert config.pagination.default_limit == 10
    assert config.pagination.max_limit == 100
    assert config.is_production() is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env-0123456789-abcdefghijklmn")
    monkeypatch.setenv("TOKEN_TTL_SECONDS", "60")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    security = SecurityConfig(_env_file=None)  # type: ignore[call-arg]

    assert security.jwt_secret == "from-env-0123456789-abcdefghijklmn"
    assert security.token_ttl_seconds == 60
    assert security.allowed_origins == ["http://a.test", "http://b.test"]


def test_production_rejects_insecure_secret() -> None:
    with pytest.raises(ValidationError):
        AppConfig(app_env="production", security=SecurityConfig(jwt_secret="dev"))


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(
        app_env="production",
        security=SecurityConfig(jwt_secret="prod-secret-0123456789-abcdefghijkl"),
    )

    assert config.is_production() is True


def test_default_limit_cannot_exceed_max() -> None:
    with pytest.raises(ValidationError):
        PaginationConfig(default_limit=50, max_limit=20)


def test_nested_configs_are_immutable() -> None:
    config = AppConfig(
        security=SecurityConfig(jwt_secret="prod-secret-0123456789-abcdefghijkl"),
        pagination=PaginationConfig(default_limit=5, max_limit=50),
    )

    with pytest.raises(ValidationError):
        config.security.jwt_secret = "dev"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        config.pagination.max_limit = 1  # type: ignore[misc]
    with pytest.raises(ValidationError):
        config.server.port = 1  # type: ignore[misc]
