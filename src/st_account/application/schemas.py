"""Pydantic response schemas for st_account API."""

from pydantic import BaseModel

from src.st_common.cents import cents_to_display


class BalanceResponse(BaseModel):
    username: str
    balance_cents: int
    balance_display: str

    @classmethod
    def from_cents(cls, username: str, balance: int) -> "BalanceResponse":
        return cls(
            username=username,
            balance_cents=balance,
            balance_display=cents_to_display(balance),
        )


class HoldingItem(BaseModel):
    symbol: str
    name: str
    quantity: int
    price_cents: int
    price_display: str
    value_cents: int
    value_display: str


class PortfolioResponse(BaseModel):
    username: str
    holdings: list[HoldingItem]
    total_value_cents: int
    total_value_display: str
    balance_cents: int
    balance_display: str
