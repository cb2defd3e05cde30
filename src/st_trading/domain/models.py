"""Domain models for st_trading — pure dataclasses."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from src.st_common.cents import line_total
from src.st_common.datetime_utils import utc_now
from src.st_common.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    username: str
    symbol: str
    quantity: int
    price_per_share_cents: int
    type: TransactionType
    timestamp: datetime = field(default_factory=utc_now)
    transaction_id: str = field(default_factory=lambda: f"txn_{uuid.uuid4().hex[:12]}")

    @property
    def total_amount_cents(self) -> int:
        return line_total(self.quantity, self.price_per_share_cents)
