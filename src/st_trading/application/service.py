"""TradingApplicationService — thin composition layer.

Runs engine operations and maps the results onto response schemas.
"""

from src.st_common.cents import cents_to_display
from src.st_gateway.user.models import User
from src.st_trading.application.schemas import (
    HistoryResponse,
    TradeResponse,
    TransactionItem,
)
from src.st_trading.domain.engine import TradingEngine
from src.st_trading.domain.models import Transaction
from src.st_trading.domain.transaction_log import TransactionLog


class TradingApplicationService:
    def __init__(self, engine: TradingEngine, log: TransactionLog) -> None:
        self._engine = engine
        self._log = log

    def buy(self, user: User, symbol: str, quantity: int) -> TradeResponse:
        return self._to_response(user, self._engine.buy(user, symbol, quantity))

    def sell(self, user: User, symbol: str, quantity: int) -> TradeResponse:
        return self._to_response(user, self._engine.sell(user, symbol, quantity))

    def history(self, user: User) -> HistoryResponse:
        return HistoryResponse(
            items=[TransactionItem.from_domain(tx) for tx in self._log.history(user.username)]
        )

    @staticmethod
    def _to_response(user: User, tx: Transaction) -> TradeResponse:
        balance = user.account.balance_cents
        return TradeResponse(
            transaction=TransactionItem.from_domain(tx),
            balance_cents=balance,
            balance_display=cents_to_display(balance),
            holding_quantity=user.portfolio.get(tx.symbol),
        )
