# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.posts.entities import Post
from postboard.domain.posts.exceptions import PostNotFoundError
from postboard.domain.posts.repositories import PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str) -> Post:
        post = self._posts.get_post(post_id)
        if post is None:
            raise PostNotFoundError()
        return post
