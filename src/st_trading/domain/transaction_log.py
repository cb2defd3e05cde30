"""TransactionLog — append-only, per-user trade history held in memory."""

from collections import defaultdict

from src.st_trading.domain.models import Transaction


class TransactionLog:
    def __init__(self) -> None:
        self._by_user: defaultdict[str, list[Transaction]] = defaultdict(list)

    def record(self, transaction: Transaction) -> None:
        self._by_user[transaction.username].append(transaction)

    def history(self, username: str) -> list[Transaction]:
        """Chronological copy of the user's trades; [] if there are none."""
        # .get() so that reading never creates an entry
        return list(self._by_user.get(username, ()))
