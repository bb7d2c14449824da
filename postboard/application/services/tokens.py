# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens signed with the process secret."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from postboard.domain.users.entities import Identity, SessionToken
from postboard.domain.users.exceptions import InvalidTokenError, TokenExpiredError
from postboard.domain.users.repositories import TokenService
from postboard.shared.logging import logger

ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("A signing secret must be provided")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, subject: str) -> SessionToken:
        now = self._clock()
        expires_at = int((now + self._ttl).timestamp())
        claims = {
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret, algorithm=ALGORITHM)
        logger.debug(f"tokens.issue: sub={subject} exp={expires_at}")
        return SessionToken(subject=subject, token=token, expires_at=expires_at)

    def validate(self, token: str) -> Identity:
        try:
            # Expiry is checked below against the injected clock
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "verify_signature": True,
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", "iat", "sub"],
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.validate: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        expires_at = claims["exp"]
        subject = claims["sub"]
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            raise InvalidTokenError()
        try:
            uuid.UUID(str(subject))
        except ValueError as exc:
            raise InvalidTokenError() from exc

        if self._clock().timestamp() > expires_at:
            logger.debug(f"tokens.validate: expired sub={subject}")
            raise TokenExpiredError()

        return Identity(subject=str(subject))


__all__ = ["ALGORITHM", "JwtTokenService"]
