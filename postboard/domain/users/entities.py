# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class User:
    """Registered account. ``password_hash`` never leaves the service."""

    id: str
    email: str
    username: str
    password_hash: str
    created_at: int


@dataclass(slots=True, frozen=True)
class Identity:
    """Authenticated caller, as proven by a valid session token."""

    subject: str


@dataclass(slots=True, frozen=True)
class SessionToken:

    subject: str
    token: str
    expires_at: int
