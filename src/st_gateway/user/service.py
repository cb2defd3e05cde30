"""AuthApplicationService — register, login, refresh.

Thin layer over UserDirectory that turns an authenticated User into a
token pair. Token subject is the username.
"""

from src.st_gateway.auth.jwt_handler import (
    create_access_token,
    create_refresh_token,
    decode_token,
)
from src.st_gateway.user.directory import RegistrationResult, UserDirectory
from src.st_gateway.user.models import User


class AuthApplicationService:
    def __init__(self, directory: UserDirectory) -> None:
        self._directory = directory

    def register(self, username: str, password: str) -> RegistrationResult:
        return self._directory.register(username, password)

    def login(self, username: str, password: str) -> tuple[User, str, str]:
        """Authenticate and return (user, access_token, refresh_token)."""
        user = self._directory.authenticate(username, password)
        return (
            user,
            create_access_token(user.username),
            create_refresh_token(user.username),
        )

    def refresh(self, refresh_token: str) -> str:
        """Validate a refresh token and return a new access token.

        Refresh tokens are not rotated.
        """
        payload = decode_token(refresh_token, expected_type="refresh")
        return create_access_token(str(payload["sub"]))
