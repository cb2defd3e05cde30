"""User domain model — pure dataclass, no SQLAlchemy dependency."""

from dataclasses import dataclass, field
from datetime import datetime

from src.st_account.domain.models import Account, Portfolio
from src.st_common.datetime_utils import utc_now


@dataclass
class User:
    username: str
    password_hash: str  # bcrypt, never the plain password
    account: Account = field(default_factory=Account)
    portfolio: Portfolio = field(default_factory=Portfolio)
    created_at: datetime = field(default_factory=utc_now)
