"""Pydantic request/response schemas for st_trading API."""

from pydantic import BaseModel, Field, field_validator

from src.st_common.cents import cents_to_display
from src.st_common.datetime_utils import to_display
from src.st_trading.domain.models import Transaction


class TradeRequest(BaseModel):
    symbol: str = Field(..., min_length=1, max_length=16)
    # Sign is checked by the engine so that a non-positive quantity surfaces
    # as InvalidQuantityError rather than a schema error.
    quantity: int

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        return v.strip().upper()


class TransactionItem(BaseModel):
    transaction_id: str
    symbol: str
    type: str
    quantity: int
    price_per_share_cents: int
    price_per_share_display: str
    total_amount_cents: int
    total_amount_display: str
    timestamp: str          # ISO8601
    timestamp_display: str  # "YYYY-MM-DD HH:MM:SS"

    @classmethod
    def from_domain(cls, tx: Transaction) -> "TransactionItem":
        return cls(
            transaction_id=tx.transaction_id,
            symbol=tx.symbol,
            type=tx.type.value,
            quantity=tx.quantity,
            price_per_share_cents=tx.price_per_share_cents,
            price_per_share_display=cents_to_display(tx.price_per_share_cents),
            total_amount_cents=tx.total_amount_cents,
            total_amount_display=cents_to_display(tx.total_amount_cents),
            timestamp=tx.timestamp.isoformat(),
            timestamp_display=to_display(tx.timestamp),
        )


class TradeResponse(BaseModel):
    transaction: TransactionItem
    balance_cents: int
    balance_display: str
    holding_quantity: int


class HistoryResponse(BaseModel):
    items: list[TransactionItem]
