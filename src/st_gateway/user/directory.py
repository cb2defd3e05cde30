"""UserDirectory — credential storage and authentication.

Holds the username -> User map in memory. The map is loaded from the
store once at construction and written back after every successful
registration. Trading never triggers a save, so balances and holdings only
reach the store when somebody registers.
"""

import logging
import threading
from dataclasses import dataclass

from config.settings import settings
from src.st_account.domain.models import Account
from src.st_common.errors import (
    InvalidCredentialsError,
    PersistenceUnavailableError,
    UsernameExistsError,
)
from src.st_gateway.auth.password import hash_password, verify_password
from src.st_gateway.user.models import User
from src.st_gateway.user.repository import UserStoreProtocol

logger = logging.getLogger("st.users")


@dataclass(frozen=True)
class RegistrationResult:
    user: User
    persisted: bool  # False when the snapshot save failed; the user still exists in memory


class UserDirectory:
    def __init__(
        self,
        store: UserStoreProtocol,
        initial_balance_cents: int | None = None,
    ) -> None:
        self._store = store
        self._initial_balance = (
            settings.INITIAL_BALANCE_CENTS
            if initial_balance_cents is None
            else initial_balance_cents
        )
        self._lock = threading.Lock()
        self._users: dict[str, User] = store.load_all()

    def register(self, username: str, password: str) -> RegistrationResult:
        """Create a user with the starting balance and an empty portfolio.

        Raises UsernameExistsError without touching the existing user.
        A failed snapshot save is logged and reported via `persisted=False`;
        the in-memory registration is not rolled back.
        """
        with self._lock:
            if username in self._users:
                raise UsernameExistsError()

            user = User(
                username=username,
                password_hash=hash_password(password),
                account=Account(balance_cents=self._initial_balance),
            )
            self._users[username] = user

            persisted = True
            try:
                self._store.save_all(self._users)
            except PersistenceUnavailableError as exc:
                persisted = False
                logger.warning("User %s registered but not persisted: %s", username, exc.message)

        logger.info("Registered user %s", username)
        return RegistrationResult(user=user, persisted=persisted)

    def authenticate(self, username: str, password: str) -> User:
        """Return the user on an exact password match.

        Note: "User not found" and "Wrong password" both raise InvalidCredentialsError
        intentionally — prevents username enumeration attacks.
        """
        user = self._users.get(username)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    def get_user(self, username: str) -> User | None:
        return self._users.get(username)

    def __len__(self) -> int:
        return len(self._users)
