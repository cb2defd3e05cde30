"""FastAPI dependency: get_current_user.

Usage in any protected router:
    from src.st_gateway.auth.dependencies import get_current_user

    @router.get("/protected")
    async def protected(user: Annotated[User, Depends(get_current_user)]):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from src.container import ServiceContainer, get_container
from src.st_common.errors import InvalidCredentialsError
from src.st_gateway.auth.jwt_handler import decode_token
from src.st_gateway.user.models import User

# tokenUrl tells Swagger UI where to get a token (used for the "Authorize" button)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid or expired token",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> User:
    """Validate the Bearer token and return the User it names.

    Raises HTTP 401 if the token is missing, invalid, expired, or names a
    user the directory does not know.
    """
    try:
        payload = decode_token(token, expected_type="access")
    except InvalidCredentialsError:
        raise _CREDENTIALS_EXCEPTION from None

    username: str | None = payload.get("sub")
    if not username:
        raise _CREDENTIALS_EXCEPTION

    user = container.directory.get_user(username)
    if user is None:
        raise _CREDENTIALS_EXCEPTION
    return user
