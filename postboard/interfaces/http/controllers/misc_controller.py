# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Blueprint, Response, jsonify

from postboard.infrastructure.repositories.in_memory_store import InMemoryStore


class MiscController:
    def __init__(self, *, store: InMemoryStore) -> None:
        self._store = store

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> Response:
        return jsonify(
            {
                "status": "healthy",
                "timestamp": int(time.time()),
                "users": self._store.count_users(),
                "posts": self._store.count_posts(),
            }
        )
