"""TradingEngine — immediate market buy/sell against the catalog price.

Each order fully executes at the current quote or is rejected. All checks
run before the first mutation, so a rejected order leaves balance,
portfolio and log exactly as they were. Once checks pass, the cash move,
the holding change and the log append happen under the user's lock as one
step.
"""

import logging
import threading
from collections import defaultdict

from src.st_catalog.domain.catalog import StockCatalog
from src.st_common.cents import line_total
from src.st_common.enums import TransactionType
from src.st_common.errors import (
    AppError,
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidQuantityError,
    NotOwnedError,
)
from src.st_gateway.user.models import User
from src.st_trading.domain.models import Transaction
from src.st_trading.domain.transaction_log import TransactionLog

logger = logging.getLogger("st.trading")


class TradingEngine:
    def __init__(self, catalog: StockCatalog, log: TransactionLog) -> None:
        self._catalog = catalog
        self._log = log
        self._locks: defaultdict[str, threading.Lock] = defaultdict(threading.Lock)
        self._locks_guard = threading.Lock()

    def buy(self, user: User, symbol: str, quantity: int) -> Transaction:
        with self._user_lock(user.username):
            try:
                return self._buy(user, symbol, quantity)
            except AppError as exc:
                _log_rejection("BUY", user.username, symbol, quantity, exc)
                raise

    def sell(self, user: User, symbol: str, quantity: int) -> Transaction:
        with self._user_lock(user.username):
            try:
                return self._sell(user, symbol, quantity)
            except AppError as exc:
                _log_rejection("SELL", user.username, symbol, quantity, exc)
                raise

    def _buy(self, user: User, symbol: str, quantity: int) -> Transaction:
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        stock = self._catalog.require(symbol)

        cost = line_total(quantity, stock.price_cents)
        available = user.account.balance_cents
        if not user.account.withdraw(cost):
            raise InsufficientFundsError(required=cost, available=available)

        user.portfolio.adjust(symbol, quantity)
        return self._record(user, symbol, quantity, stock.price_cents, TransactionType.BUY)

    def _sell(self, user: User, symbol: str, quantity: int) -> Transaction:
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        held = user.portfolio.get(symbol)
        if held == 0:
            raise NotOwnedError(symbol)
        if quantity > held:
            raise InsufficientSharesError(symbol, requested=quantity, held=held)
        stock = self._catalog.require(symbol)

        user.account.deposit(line_total(quantity, stock.price_cents))
        user.portfolio.adjust(symbol, -quantity)
        return self._record(user, symbol, quantity, stock.price_cents, TransactionType.SELL)

    def _record(
        self,
        user: User,
        symbol: str,
        quantity: int,
        price_cents: int,
        tx_type: TransactionType,
    ) -> Transaction:
        tx = Transaction(
            username=user.username,
            symbol=symbol,
            quantity=quantity,
            price_per_share_cents=price_cents,
            type=tx_type,
        )
        self._log.record(tx)
        logger.info(
            "%s %s %d x %s @ %d = %d (balance %d) %s",
            tx.type.value,
            tx.username,
            tx.quantity,
            tx.symbol,
            tx.price_per_share_cents,
            tx.total_amount_cents,
            user.account.balance_cents,
            tx.transaction_id,
        )
        return tx

    def _user_lock(self, username: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks[username]


def _log_rejection(side: str, username: str, symbol: str, quantity: int, exc: AppError) -> None:
    logger.info(
        "%s rejected for %s: %d x %s (code %d: %s)",
        side,
        username,
        quantity,
        symbol,
        exc.code,
        exc.message,
    )
