# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Identity, SessionToken, User
from .exceptions import (
    AuthenticationError,
    HashingError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "AuthenticationError",
    "HashingError",
    "Identity",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "SessionToken",
    "TokenExpiredError",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
