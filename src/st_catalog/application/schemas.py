"""Pydantic response schemas for st_catalog API."""

from pydantic import BaseModel

from src.st_catalog.domain.models import Stock
from src.st_common.cents import cents_to_display


class StockItem(BaseModel):
    symbol: str
    name: str
    price_cents: int
    price_display: str

    @classmethod
    def from_domain(cls, stock: Stock) -> "StockItem":
        return cls(
            symbol=stock.symbol,
            name=stock.name,
            price_cents=stock.price_cents,
            price_display=cents_to_display(stock.price_cents),
        )


class StockListResponse(BaseModel):
    items: list[StockItem]
