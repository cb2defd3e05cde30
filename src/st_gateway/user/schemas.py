"""Pydantic request/response schemas for st_gateway.

Also holds the snapshot document schema used by SnapshotUserStore.
"""

from pydantic import BaseModel, Field, field_validator

from src.st_gateway.user.models import User


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Username must not be blank")
        return v


class LoginRequest(BaseModel):
    username: str
    password: str


class RefreshRequest(BaseModel):
    refresh_token: str


class RegisterResponse(BaseModel):
    username: str
    balance_cents: int
    created_at: str
    persisted: bool


class LoginResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int = 1800  # 30 minutes in seconds
    username: str


class RefreshResponse(BaseModel):
    access_token: str
    expires_in: int = 1800


# ---------------------------------------------------------------------------
# Snapshot document
# ---------------------------------------------------------------------------


class UserRecord(BaseModel):
    username: str
    password_hash: str
    balance_cents: int = Field(..., ge=0)
    portfolio: dict[str, int] = Field(default_factory=dict)
    created_at: str

    @field_validator("portfolio")
    @classmethod
    def positive_quantities(cls, v: dict[str, int]) -> dict[str, int]:
        if any(qty <= 0 for qty in v.values()):
            raise ValueError("Portfolio quantities must be positive")
        return v

    @classmethod
    def from_domain(cls, user: User) -> "UserRecord":
        return cls(
            username=user.username,
            password_hash=user.password_hash,
            balance_cents=user.account.balance_cents,
            portfolio=user.portfolio.list(),
            created_at=user.created_at.isoformat(),
        )


class UserSnapshot(BaseModel):
    users: list[UserRecord]
