# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Post, PostPage
from .exceptions import PostForbiddenError, PostNotFoundError
from .repositories import PostRepository

__all__ = ["Post", "PostForbiddenError", "PostNotFoundError", "PostPage", "PostRepository"]
