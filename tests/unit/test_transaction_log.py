"""Unit tests for TransactionLog."""

from src.st_common.enums import TransactionType
from src.st_trading.domain.models import Transaction
from src.st_trading.domain.transaction_log import TransactionLog


def _tx(username: str, symbol: str = "TTM", qty: int = 1) -> Transaction:
    return Transaction(
        username=username,
        symbol=symbol,
        quantity=qty,
        price_per_share_cents=42527,
        type=TransactionType.BUY,
    )


def test_history_of_unknown_user_is_empty() -> None:
    log = TransactionLog()
    assert log.history("nobody") == []


def test_reading_history_does_not_create_entries() -> None:
    log = TransactionLog()
    log.history("nobody")
    log.history("nobody").append(_tx("nobody"))
    assert log.history("nobody") == []


def test_records_in_insertion_order() -> None:
    log = TransactionLog()
    first, second, third = _tx("alice", "TTM"), _tx("alice", "YSB"), _tx("alice", "GAB")
    for tx in (first, second, third):
        log.record(tx)
    assert log.history("alice") == [first, second, third]


def test_histories_are_kept_per_user() -> None:
    log = TransactionLog()
    a, b = _tx("alice"), _tx("bob")
    log.record(a)
    log.record(b)
    assert log.history("alice") == [a]
    assert log.history("bob") == [b]


def test_history_is_idempotent() -> None:
    log = TransactionLog()
    log.record(_tx("alice"))
    assert log.history("alice") == log.history("alice")


def test_total_amount_is_quantity_times_price() -> None:
    assert _tx("alice", qty=10).total_amount_cents == 425270


def test_transaction_ids_are_unique() -> None:
    assert _tx("alice").transaction_id != _tx("alice").transaction_id
