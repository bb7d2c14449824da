from .password_hashing import WerkzeugPasswordHasher
from .tokens import JwtTokenService

__all__ = ["JwtTokenService", "WerkzeugPasswordHasher"]
