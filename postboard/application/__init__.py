# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import JwtTokenService, WerkzeugPasswordHasher
from .use_cases.posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from .use_cases.users import GetCurrentUserUseCase, LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "CreatePostUseCase",
    "DeletePostUseCase",
    "GetCurrentUserUseCase",
    "GetPostUseCase",
    "JwtTokenService",
    "ListPostsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "WerkzeugPasswordHasher",
]
