# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from postboard.domain.users.entities import SessionToken, User
from postboard.domain.users.exceptions import InvalidCredentialsError
from postboard.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from postboard.shared.logging import logger


class LoginUserUseCase:
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
        # Verified against when the email is unknown so both failures cost the same
        self._decoy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, email: str, password: str) -> tuple[User, SessionToken]:
        user = self._users.find_user_by_email(email)
        if user is None:
            self._password_hasher.verify(password, self._decoy_hash)
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token
