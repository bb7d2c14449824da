"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from postboard.application.services.password_hashing import WerkzeugPasswordHasher
from postboard.application.services.tokens import JwtTokenService
from postboard.application.use_cases.posts.create_post import CreatePostUseCase
from postboard.application.use_cases.posts.delete_post import DeletePostUseCase
from postboard.application.use_cases.posts.get_post import GetPostUseCase
from postboard.application.use_cases.posts.list_posts import ListPostsUseCase
from postboard.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from postboard.application.use_cases.users.login_user import LoginUserUseCase
from postboard.application.use_cases.users.register_user import RegisterUserUseCase
from postboard.infrastructure.repositories.in_memory_store import InMemoryStore
from postboard.interfaces.http.auth import BearerAuth
from postboard.interfaces.http.controllers.auth_controller import AuthController
from postboard.interfaces.http.controllers.misc_controller import MiscController
from postboard.interfaces.http.controllers.posts_controller import PostsController
from postboard.interfaces.http.controllers.users_controller import UsersController
from postboard.shared.config import AppConfig


class Container:
    """Builds one instance of each component per application."""

    def __init__(self, config: AppConfig, *, store: InMemoryStore | None = None) -> None:
        self.config = config
        if store is not None:
            self.__dict__["store"] = store

    @cached_property
    def store(self) -> InMemoryStore:
        return InMemoryStore()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.security.password_hash_method,
            max_bytes=self.config.security.password_max_bytes,
        )

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.security.jwt_secret,
            ttl=timedelta(seconds=self.config.security.token_ttl_seconds),
        )

    @cached_property
    def bearer_auth(self) -> BearerAuth:
        return BearerAuth(self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.store,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.store,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.store)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            auth=self.bearer_auth,
            get_current_user=self.get_current_user_use_case,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            auth=self.bearer_auth,
            pagination=self.config.pagination,
            list_posts=ListPostsUseCase(posts=self.store),
            get_post=GetPostUseCase(posts=self.store),
            create_post=CreatePostUseCase(posts=self.store),
            delete_post=DeletePostUseCase(posts=self.store),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(store=self.store)
