# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from postboard.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from postboard.interfaces.http.auth import BearerAuth, current_identity
from postboard.interfaces.http.dto.auth import UserResponseDTO


class UsersController:
    def __init__(self, *, auth: BearerAuth, get_current_user: GetCurrentUserUseCase) -> None:
        self._auth = auth
        self._get_current_user = get_current_user

    def me(self) -> Response:
        user = self._get_current_user.execute(current_identity())
        return jsonify(UserResponseDTO.from_entity(user).model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("/me", view_func=self._auth.required(self.me), methods=["GET"])
        return bp
