from __future__ import annotations

import email_validator
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from postboard.domain.users.entities import SessionToken, User


def _check_email(value: str) -> str:
    try:
        email_validator.validate_email(value, check_deliverability=False)
    except email_validator.EmailNotValidError as exc:
        raise PydanticCustomError(
            "email_invalid",
            "Invalid email format: {reason}",
            {"reason": str(exc)},
        ) from exc
    # Stored as submitted, the normalized form lowercases the domain
    return value


class SignupRequestDTO(BaseModel):
    email: str = Field(min_length=3, max_length=254)
    username: str = Field(min_length=3, max_length=20)
    password: str = Field(min_length=8, max_length=100)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1, max_length=100)  # No strength check on login

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)


class UserResponseDTO(BaseModel):
    id: str
    email: str
    username: str
    created_at: int

    @classmethod
    def from_entity(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            created_at=user.created_at,
        )


class AuthResponseDTO(BaseModel):
    token: str
    user: UserResponseDTO

    @classmethod
    def build(cls, user: User, token: SessionToken) -> "AuthResponseDTO":
        return cls(token=token.token, user=UserResponseDTO.from_entity(user))
