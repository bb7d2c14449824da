# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from postboard.application.use_cases.posts.create_post import CreatePostUseCase
from postboard.application.use_cases.posts.delete_post import DeletePostUseCase
from postboard.application.use_cases.posts.get_post import GetPostUseCase
from postboard.application.use_cases.posts.list_posts import ListPostsUseCase
from postboard.interfaces.http.auth import BearerAuth, current_identity
from postboard.interfaces.http.dto.posts import (
    CreatePostRequestDTO,
    PaginatedPostsDTO,
    PaginationQueryDTO,
    PostResponseDTO,
)
from postboard.shared.config import PaginationConfig
from postboard.shared.errors import ValidationError as AppValidationError
from postboard.shared.errors.validation import raise_validation_error


def _parse_post_id(raw: str) -> str:
    try:
        return str(uuid.UUID(raw))
    except ValueError:
        raise AppValidationError("invalid_post_id", context={"fields": ["id"]}) from None


class PostsController:
    def __init__(
        self,
        *,
        auth: BearerAuth,
        pagination: PaginationConfig,
        list_posts: ListPostsUseCase,
        get_post: GetPostUseCase,
        create_post: CreatePostUseCase,
        delete_post: DeletePostUseCase,
    ) -> None:
        self._auth = auth
        self._pagination = pagination
        self._list_posts = list_posts
        self._get_post = get_post
        self._create_post = create_post
        self._delete_post = delete_post

    def list(self) -> Response:
        raw = {
            "page": request.args.get("page", 1),
            "limit": request.args.get("limit", self._pagination.default_limit),
        }
        try:
            query = PaginationQueryDTO.model_validate(raw)
        except ValidationError as exc:
            raise_validation_error(exc)
        if query.limit > self._pagination.max_limit:
            raise AppValidationError(
                context={"fields": ["limit"], "max_limit": self._pagination.max_limit}
            )

        page = self._list_posts.execute(query.page, query.limit)
        return jsonify(PaginatedPostsDTO.from_page(page).model_dump())

    def get(self, post_id: str) -> Response:
        post = self._get_post.execute(_parse_post_id(post_id))
        return jsonify(PostResponseDTO.from_entity(post).model_dump())

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreatePostRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        post = self._create_post.execute(current_identity(), dto.title, dto.content)
        return jsonify(PostResponseDTO.from_entity(post).model_dump()), HTTPStatus.CREATED

    def delete(self, post_id: str) -> tuple[str, int]:
        self._delete_post.execute(current_identity(), _parse_post_id(post_id))
        return "", HTTPStatus.NO_CONTENT

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/posts")
        bp.add_url_rule("", view_func=self.list, methods=["GET"])
        bp.add_url_rule(
            "", endpoint="create", view_func=self._auth.required(self.create), methods=["POST"]
        )
        bp.add_url_rule("/<post_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule(
            "/<post_id>",
            endpoint="delete",
            view_func=self._auth.required(self.delete),
            methods=["DELETE"],
        )
        return bp
