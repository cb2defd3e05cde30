"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth/User
  2xxx: Account (cash)
  3xxx: Catalog
  4xxx: Order
  5xxx: Portfolio
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Auth/User ---

class UsernameExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Username already exists", 409)


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Invalid username or password", 401)


class InvalidRefreshTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(1005, "Refresh token is invalid or expired", 401)


# --- 2xxx: Account ---

class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient funds: required {required} cents, available {available} cents",
            422,
        )


# --- 3xxx: Catalog ---

class UnknownSymbolError(AppError):
    def __init__(self, symbol: str) -> None:
        super().__init__(3001, f"Unknown stock symbol: {symbol}", 404)


# --- 4xxx: Order ---

class InvalidQuantityError(AppError):
    def __init__(self, quantity: int) -> None:
        super().__init__(4001, f"Quantity must be greater than zero, got {quantity}", 422)


# --- 5xxx: Portfolio ---

class NotOwnedError(AppError):
    def __init__(self, symbol: str) -> None:
        super().__init__(5001, f"No shares of {symbol} held", 422)


class InsufficientSharesError(AppError):
    def __init__(self, symbol: str, requested: int, held: int) -> None:
        super().__init__(
            5002,
            f"Insufficient shares of {symbol}: requested {requested}, held {held}",
            422,
        )


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class PersistenceUnavailableError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9003, f"Persistence unavailable: {detail}", 503)
