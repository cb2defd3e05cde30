"""Domain models for st_catalog — pure dataclasses, no business logic."""

from dataclasses import dataclass


@dataclass
class Stock:
    symbol: str
    name: str
    price_cents: int  # quoted price; mutable only through StockCatalog.reprice
