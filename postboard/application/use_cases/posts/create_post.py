# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.posts.entities import Post
from postboard.domain.posts.repositories import PostRepository
from postboard.domain.users.entities import Identity
from postboard.shared.logging import logger


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, identity: Identity, title: str, content: str) -> Post:
        post = self._posts.create_post(title, content, author_id=identity.subject)
        logger.info(f"posts.create: id={post.id} author={identity.subject}")
        return post
