# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .posts import Post, PostForbiddenError, PostNotFoundError, PostPage, PostRepository
from .users import (
    HashingError,
    Identity,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHasher,
    SessionToken,
    TokenExpiredError,
    TokenService,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    "HashingError",
    "Identity",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "Post",
    "PostForbiddenError",
    "PostNotFoundError",
    "PostPage",
    "PostRepository",
    "SessionToken",
    "TokenExpiredError",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
