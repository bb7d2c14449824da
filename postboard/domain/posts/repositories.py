# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Post, PostPage


class PostRepository(Protocol):
    def create_post(self, title: str, content: str, author_id: str) -> Post: ...
    def get_post(self, post_id: str) -> Post | None: ...
    def list_posts(self, page: int, limit: int) -> PostPage: ...
    def delete_post(self, post_id: str, requester_id: str) -> None: ...
