# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.posts.repositories import PostRepository
from postboard.domain.users.entities import Identity
from postboard.shared.logging import logger


class DeletePostUseCase:
    """Only the author may delete; the store checks ownership atomically."""

    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, identity: Identity, post_id: str) -> None:
        self._posts.delete_post(post_id, requester_id=identity.subject)
        logger.info(f"posts.delete: id={post_id} by={identity.subject}")
