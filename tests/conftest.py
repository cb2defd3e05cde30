"""Shared test fixtures.

Environment defaults are set before anything under src/ or config/ is
imported, since Settings() is evaluated at import time.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402

from src.st_account.domain.models import Account  # noqa: E402
from src.st_catalog.domain.catalog import StockCatalog  # noqa: E402
from src.st_gateway.auth.password import hash_password  # noqa: E402
from src.st_gateway.user.models import User  # noqa: E402
from src.st_trading.domain.engine import TradingEngine  # noqa: E402
from src.st_trading.domain.transaction_log import TransactionLog  # noqa: E402


class InMemoryUserStore:
    """UserStoreProtocol fake that remembers what it was given."""

    def __init__(self, users: dict[str, User] | None = None) -> None:
        self.saved: dict[str, User] = dict(users or {})
        self.save_calls = 0

    def load_all(self) -> dict[str, User]:
        return dict(self.saved)

    def save_all(self, users: dict[str, User]) -> None:
        self.save_calls += 1
        self.saved = dict(users)


@pytest.fixture
def memory_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def catalog() -> StockCatalog:
    return StockCatalog.with_defaults()


@pytest.fixture
def transaction_log() -> TransactionLog:
    return TransactionLog()


@pytest.fixture
def engine(catalog: StockCatalog, transaction_log: TransactionLog) -> TradingEngine:
    return TradingEngine(catalog, transaction_log)


@pytest.fixture
def alice() -> User:
    """A freshly registered user: 10,000.00 cash, no holdings."""
    return User(
        username="alice",
        password_hash=hash_password("s3cret"),
        account=Account(balance_cents=1_000_000),
    )
