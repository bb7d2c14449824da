# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Post:

    id: str
    title: str
    content: str
    author_id: str
    created_at: int
    updated_at: int


@dataclass(slots=True, frozen=True)
class PostPage:
    """One slice of the post listing, ``total`` counts every post."""

    items: Sequence[Post]
    page: int
    limit: int
    total: int
