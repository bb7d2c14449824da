# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.users.entities import Identity, User
from postboard.domain.users.exceptions import UserNotFoundError
from postboard.domain.users.repositories import UserRepository


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, identity: Identity) -> User:
        user = self._users.get_user(identity.subject)
        if user is None:
            raise UserNotFoundError()
        return user
