# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from postboard.container import Container
from postboard.infrastructure.repositories.in_memory_store import InMemoryStore
from postboard.shared.config import AppConfig, load_config
from postboard.shared.logging import logger, setup_logging
from postboard.shared.middleware.error_handler import configure_error_handling
from postboard.shared.middleware.request_logger import configure_request_logging

ROUTES = (
    ("GET", "/health", "Health check"),
    ("POST", "/auth/signup", "Create account"),
    ("POST", "/auth/login", "Login"),
    ("GET", "/users/me", "Get current user (auth)"),
    ("POST", "/posts", "Create post (auth)"),
    ("GET", "/posts", "List posts (paginated)"),
    ("GET", "/posts/<id>", "Get specific post"),
    ("DELETE", "/posts/<id>", "Delete post (auth, owner only)"),
)


def create_app(
    config: AppConfig | None = None,
    *,
    store: InMemoryStore | None = None,
    configure_logging: bool = True,
) -> Flask:
    config = config or load_config()
    if configure_logging:
        setup_logging(config.log_level if not config.debug_logging else "DEBUG")

    container = Container(config, store=store)

    app = Flask(__name__)
    app.extensions["postboard"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(app, resources={r"/*": {"origins": config.security.allowed_origins}})

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)

    logger.info(f"Server running on http://{config.server.host}:{config.server.port}")
    logger.info("API Endpoints:")
    for method, path, description in ROUTES:
        logger.info(f"  {method:<7}{path:<18}- {description}")

    app.run(host=config.server.host, port=config.server.port, threaded=True)


if __name__ == "__main__":
    main()
