from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from postboard.app import create_app
from postboard.application.services.password_hashing import WerkzeugPasswordHasher
from postboard.application.services.tokens import JwtTokenService
from postboard.infrastructure.repositories.in_memory_store import InMemoryStore
from postboard.shared.config import AppConfig, PaginationConfig, SecurityConfig, ServerConfig

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"
# Cheap work factor, the production default is scrypt
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        app_env="test",
        debug_logging=False,
        log_level="WARNING",
        security=SecurityConfig(
            jwt_secret=TEST_SECRET,
            token_ttl_seconds=3600,
            password_hash_method=FAST_HASH_METHOD,
            password_max_bytes=1024,
            allowed_origins=["*"],
        ),
        pagination=PaginationConfig(default_limit=10, max_limit=100),
        server=ServerConfig(host="127.0.0.1", port=3000),
    )


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


@pytest.fixture()
def token_service() -> JwtTokenService:
    return JwtTokenService(secret=TEST_SECRET)


@pytest.fixture()
def app(config: AppConfig, store: InMemoryStore) -> Flask:
    flask_app = create_app(config, store=store, configure_logging=False)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
