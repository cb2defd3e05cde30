"""Auth API router: register, login, refresh.

All endpoints return ApiResponse. request_id is read from
request.state (injected by RequestLogMiddleware).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from config.settings import settings
from src.container import ServiceContainer, get_container
from src.st_common.response import ApiResponse, success_response
from src.st_gateway.user.schemas import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    summary="User registration",
)
async def register(
    request: Request,
    body: RegisterRequest,
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> ApiResponse:
    result = container.auth.register(body.username, body.password)

    data = RegisterResponse(
        username=result.user.username,
        balance_cents=result.user.account.balance_cents,
        created_at=result.user.created_at.isoformat(),
        persisted=result.persisted,
    )
    resp = success_response(data.model_dump(), request)
    if result.persisted:
        resp.message = "User registered successfully"
    else:
        resp.message = "User registered, but the user directory could not be saved"
    return resp


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse,
    summary="User login",
)
async def login(
    request: Request,
    body: LoginRequest,
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> ApiResponse:
    user, access_token, refresh_token = container.auth.login(body.username, body.password)

    data = LoginResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="Bearer",
        expires_in=settings.JWT_EXPIRE_MINUTES * 60,
        username=user.username,
    )
    resp = success_response(data.model_dump(), request)
    resp.message = "Login successful"
    return resp


@router.post(
    "/refresh",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse,
    summary="Refresh access token",
)
async def refresh_token(
    request: Request,
    body: RefreshRequest,
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> ApiResponse:
    new_access_token = container.auth.refresh(body.refresh_token)

    data = RefreshResponse(
        access_token=new_access_token,
        expires_in=settings.JWT_EXPIRE_MINUTES * 60,
    )
    resp = success_response(data.model_dump(), request)
    resp.message = "Token refreshed"
    return resp
