"""Integer arithmetic utilities for cents-based money.

All prices, amounts, and balances use int (cents). No float.
Decimal is only used at the edge, to parse quoted prices like "425.27".
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from config.settings import settings


def to_cents(amount: str | int | Decimal) -> int:
    """Parse a decimal amount into cents: '425.27' -> 42527.

    Half-up rounding below one cent. Raises ValueError on garbage input.
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValueError(f"Not a decimal amount: {amount!r}") from exc
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def cents_to_display(cents: int, symbol: str | None = None) -> str:
    """Convert cents to display string: 425270 -> '₹4,252.70', -1200 -> '-₹12.00'."""
    sym = settings.CURRENCY_SYMBOL if symbol is None else symbol
    if cents < 0:
        abs_cents = -cents
        return f"-{sym}{abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"{sym}{cents // 100:,}.{cents % 100:02d}"


def line_total(quantity: int, price_cents: int) -> int:
    """Total value of `quantity` shares at `price_cents` each."""
    return quantity * price_cents
