# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, cast

from flask import Request, g, request

from postboard.domain.users.entities import Identity
from postboard.domain.users.exceptions import InvalidTokenError
from postboard.domain.users.repositories import TokenService
from postboard.shared.logging import logger

_BEARER_PREFIX = "bearer "


def bearer_token(req: Request) -> str | None:
    auth = req.headers.get("Authorization", "")
    if auth[: len(_BEARER_PREFIX)].lower() != _BEARER_PREFIX:
        return None
    token = auth[len(_BEARER_PREFIX) :].strip()
    return token or None


def current_identity() -> Identity:
    """Identity stored by :meth:`BearerAuth.required` for the running request."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise InvalidTokenError()
    return cast(Identity, identity)


class BearerAuth:
    """Resolve ``Authorization: Bearer <token>`` into an :class:`Identity`."""

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, req: Request) -> Identity:
        token = bearer_token(req)
        if token is None:
            logger.warning(f"No bearer token on {req.method} {req.path}")
            raise InvalidTokenError()
        return self._tokens.validate(token)

    def required(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            identity = self.authenticate(request)
            g.identity = identity
            g.user_id = identity.subject
            logger.debug(f"Auth OK: user={identity.subject} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner


__all__ = ["BearerAuth", "bearer_token", "current_identity"]
