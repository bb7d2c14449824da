# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Identity, SessionToken, User


class UserRepository(Protocol):
    def create_user(self, email: str, username: str, password_hash: str) -> User: ...
    def find_user_by_email(self, email: str) -> User | None: ...
    def get_user(self, user_id: str) -> User | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject: str) -> SessionToken: ...
    def validate(self, token: str) -> Identity: ...
