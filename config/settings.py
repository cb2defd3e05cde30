from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Snapshot store (SQLite file next to the process by default)
    DATABASE_URL: str = "sqlite:///stock_trading.db"
    SNAPSHOT_KEY: str = "users"

    # JWT — no default, MUST be set in .env
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 30
    JWT_REFRESH_EXPIRE_DAYS: int = 7

    # Password hashing cost; tests lower this to keep bcrypt fast
    BCRYPT_ROUNDS: int = 12

    # Trading
    INITIAL_BALANCE_CENTS: int = 1_000_000  # 10,000.00
    CURRENCY_SYMBOL: str = "₹"

    # App
    APP_NAME: str = "Stock Trading Simulator"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
