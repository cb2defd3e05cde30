"""Store Protocol — dependency inversion for testability.

Unit tests inject an in-memory fake that conforms to this Protocol.
The infrastructure implementation is SnapshotUserStore.
"""

from typing import Protocol

from src.st_gateway.user.models import User


class UserStoreProtocol(Protocol):
    def load_all(self) -> dict[str, User]:
        """Return every stored user; {} when nothing usable is stored."""
        ...

    def save_all(self, users: dict[str, User]) -> None:
        """Overwrite the stored snapshot. Raises PersistenceUnavailableError."""
        ...
