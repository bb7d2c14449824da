# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import itertools
import threading
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from postboard.domain.posts.entities import Post, PostPage
from postboard.domain.posts.exceptions import PostForbiddenError, PostNotFoundError
from postboard.domain.posts.repositories import PostRepository
from postboard.domain.users.entities import User
from postboard.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from postboard.domain.users.repositories import UserRepository
from postboard.shared.errors.base import ValidationError
from postboard.shared.logging import logger


@dataclass(slots=True, frozen=True)
class _PostRecord:
    seq: int
    post: Post


class InMemoryStore(UserRepository, PostRepository):
    """Process-lifetime storage for users and posts.

    One lock guards the user map, the email index and the post map. Every
    public method holds it for its whole body, so check-then-act sequences
    (unique email on signup, owner check on delete) are atomic.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._clock = clock
        self._new_id = id_factory
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._email_index: dict[str, str] = {}
        self._posts: dict[str, _PostRecord] = {}
        self._seq = itertools.count(1)

    def _now(self) -> int:
        return int(self._clock())

    # users

    def create_user(self, email: str, username: str, password_hash: str) -> User:
        with self._lock:
            if email in self._email_index:
                raise UserAlreadyExistsError()
            user = User(
                id=self._new_id(),
                email=email,
                username=username,
                password_hash=password_hash,
                created_at=self._now(),
            )
            self._users[user.id] = user
            self._email_index[email] = user.id
        logger.debug(f"store.create_user: id={user.id}")
        return user

    def find_user_by_email(self, email: str) -> User | None:
        with self._lock:
            user_id = self._email_index.get(email)
            if user_id is None:
                return None
            return self._users.get(user_id)

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    # posts

    def create_post(self, title: str, content: str, author_id: str) -> Post:
        with self._lock:
            if author_id not in self._users:
                raise UserNotFoundError()
            now = self._now()
            post = Post(
                id=self._new_id(),
                title=title,
                content=content,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            self._posts[post.id] = _PostRecord(seq=next(self._seq), post=post)
        logger.debug(f"store.create_post: id={post.id} author={author_id}")
        return post

    def get_post(self, post_id: str) -> Post | None:
        with self._lock:
            record = self._posts.get(post_id)
            return record.post if record else None

    def list_posts(self, page: int, limit: int) -> PostPage:
        if page < 1:
            raise ValidationError(context={"fields": ["page"]})
        if limit < 1:
            raise ValidationError(context={"fields": ["limit"]})

        start = (page - 1) * limit
        with self._lock:
            # Newest first; seq breaks ties between posts created in the same second
            ordered = sorted(self._posts.values(), key=lambda r: r.seq, reverse=True)
            total = len(ordered)
        items = [record.post for record in ordered[start : start + limit]]
        return PostPage(items=items, page=page, limit=limit, total=total)

    def delete_post(self, post_id: str, requester_id: str) -> None:
        with self._lock:
            record = self._posts.get(post_id)
            if record is None:
                raise PostNotFoundError()
            if record.post.author_id != requester_id:
                raise PostForbiddenError()
            del self._posts[post_id]
        logger.debug(f"store.delete_post: id={post_id} by={requester_id}")

    def count_posts(self) -> int:
        with self._lock:
            return len(self._posts)


__all__ = ["InMemoryStore"]
