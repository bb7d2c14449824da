"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from postboard.domain.users.exceptions import HashingError
from postboard.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "scrypt:32768:8:1"


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted hashes in werkzeug's ``method$salt$hash`` format.

    The work factor is part of ``method`` (``scrypt:N:r:p`` or
    ``pbkdf2:sha256:iterations``). Comparison is constant time.
    """

    def __init__(self, *, method: str = DEFAULT_METHOD, max_bytes: int = 1024) -> None:
        self._method = method
        self._max_bytes = max_bytes

    def _check_input(self, password: str) -> None:
        if not isinstance(password, str) or not password:
            raise HashingError("password must be a non-empty string")
        if len(password.encode("utf-8")) > self._max_bytes:
            raise HashingError(f"password exceeds {self._max_bytes} bytes")

    def hash(self, password: str) -> str:
        self._check_input(password)
        try:
            return str(generate_password_hash(password, method=self._method))
        except (TypeError, ValueError) as exc:
            raise HashingError(f"cannot hash with method {self._method!r}") from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(hashed, str) or hashed.count("$") < 2:
            raise HashingError("stored hash is malformed")
        if not isinstance(password, str):
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (TypeError, ValueError) as exc:
            raise HashingError("stored hash uses an unknown method") from exc
