"""Domain models for st_account — cash ledger and share holdings.

Pure Python, no persistence dependency. Both objects are owned by a single
User and are only mutated by the trading engine.
"""

from dataclasses import dataclass, field


@dataclass
class Account:
    balance_cents: int = 0

    def deposit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Deposit amount must be non-negative, got {amount}")
        self.balance_cents += amount

    def withdraw(self, amount: int) -> bool:
        """Debit `amount` if covered. Returns False and changes nothing otherwise."""
        if amount < 0:
            raise ValueError(f"Withdraw amount must be non-negative, got {amount}")
        if amount > self.balance_cents:
            return False
        self.balance_cents -= amount
        return True


@dataclass
class Portfolio:
    holdings: dict[str, int] = field(default_factory=dict)

    def adjust(self, symbol: str, delta: int) -> int:
        """Apply `delta` to the holding and return the new quantity.

        A result <= 0 drops the entry; holdings are never stored at zero or below.
        """
        quantity = self.holdings.get(symbol, 0) + delta
        if quantity <= 0:
            self.holdings.pop(symbol, None)
            return 0
        self.holdings[symbol] = quantity
        return quantity

    def get(self, symbol: str) -> int:
        return self.holdings.get(symbol, 0)

    def list(self) -> dict[str, int]:
        return {sym: qty for sym, qty in self.holdings.items() if qty > 0}
