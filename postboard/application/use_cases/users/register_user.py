# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.users.entities import SessionToken, User
from postboard.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from postboard.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, username: str, password: str) -> tuple[User, SessionToken]:
        # Hash outside the store lock; uniqueness is decided by create_user alone
        hashed = self._password_hasher.hash(password)
        user = self._users.create_user(email, username, hashed)
        token = self._tokens.issue(user.id)
        logger.info(f"auth.register: new user id={user.id}")
        return user, token
