"""Stocks the simulator starts with: (symbol, name, quoted price)."""

DEFAULT_STOCKS: tuple[tuple[str, str, str], ...] = (
    ("TTM", "TATAMOTORS", "425.27"),
    ("YSB", "YESBANK", "185.92"),
    ("JSW", "JSWSTEEL", "175.33"),
    ("ASP", "ASIANPAINT", "187.63"),
    ("GAB", "GABRIEL", "243.64"),
)
