"""StockCatalog — the set of tradable stocks and their quoted prices.

Symbols are keys; listing order is insertion order and stays stable
across calls.
"""

from src.st_catalog.domain.constants import DEFAULT_STOCKS
from src.st_catalog.domain.models import Stock
from src.st_common.cents import to_cents
from src.st_common.errors import UnknownSymbolError


class StockCatalog:
    def __init__(self, stocks: list[Stock] | None = None) -> None:
        self._stocks: dict[str, Stock] = {}
        for stock in stocks or []:
            self.add(stock)

    @classmethod
    def with_defaults(cls) -> "StockCatalog":
        return cls(
            [Stock(sym, name, to_cents(quote)) for sym, name, quote in DEFAULT_STOCKS]
        )

    def add(self, stock: Stock) -> None:
        """Insert, or overwrite the existing entry with the same symbol."""
        self._stocks[stock.symbol] = stock

    def get(self, symbol: str) -> Stock | None:
        return self._stocks.get(symbol)

    def require(self, symbol: str) -> Stock:
        stock = self._stocks.get(symbol)
        if stock is None:
            raise UnknownSymbolError(symbol)
        return stock

    def list(self) -> list[Stock]:
        return list(self._stocks.values())

    def reprice(self, symbol: str, price_cents: int) -> Stock:
        if price_cents < 0:
            raise ValueError(f"Price must be non-negative, got {price_cents}")
        stock = self.require(symbol)
        stock.price_cents = price_cents
        return stock

    def __len__(self) -> int:
        return len(self._stocks)
