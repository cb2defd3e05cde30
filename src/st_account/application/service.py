"""AccountApplicationService — read-only views over a user's cash and holdings.

Valuation uses the catalog's current price. A holding whose symbol has left
the catalog is skipped, since it has no quote to value it at.
"""

from src.st_account.application.schemas import (
    BalanceResponse,
    HoldingItem,
    PortfolioResponse,
)
from src.st_catalog.domain.catalog import StockCatalog
from src.st_common.cents import cents_to_display, line_total
from src.st_gateway.user.models import User


class AccountApplicationService:
    def __init__(self, catalog: StockCatalog) -> None:
        self._catalog = catalog

    def get_balance(self, user: User) -> BalanceResponse:
        return BalanceResponse.from_cents(user.username, user.account.balance_cents)

    def get_portfolio(self, user: User) -> PortfolioResponse:
        items: list[HoldingItem] = []
        total = 0
        for symbol, quantity in user.portfolio.list().items():
            stock = self._catalog.get(symbol)
            if stock is None:
                continue
            value = line_total(quantity, stock.price_cents)
            total += value
            items.append(
                HoldingItem(
                    symbol=symbol,
                    name=stock.name,
                    quantity=quantity,
                    price_cents=stock.price_cents,
                    price_display=cents_to_display(stock.price_cents),
                    value_cents=value,
                    value_display=cents_to_display(value),
                )
            )
        balance = user.account.balance_cents
        return PortfolioResponse(
            username=user.username,
            holdings=items,
            total_value_cents=total,
            total_value_display=cents_to_display(total),
            balance_cents=balance,
            balance_display=cents_to_display(balance),
        )
