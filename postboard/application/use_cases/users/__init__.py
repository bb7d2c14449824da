from .get_current_user import GetCurrentUserUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = ["GetCurrentUserUseCase", "LoginUserUseCase", "RegisterUserUseCase"]
