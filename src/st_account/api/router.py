"""st_account REST API — 2 read-only endpoints, both require JWT authentication."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.container import ServiceContainer, get_container
from src.st_common.response import ApiResponse, success_response
from src.st_gateway.auth.dependencies import get_current_user
from src.st_gateway.user.models import User

router = APIRouter(prefix="/account", tags=["account"])


@router.get("/balance")
async def get_balance(
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
    request: Request,
) -> ApiResponse:
    data = container.accounts.get_balance(current_user)
    return success_response(data.model_dump(), request)


@router.get("/portfolio")
async def get_portfolio(
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
    request: Request,
) -> ApiResponse:
    data = container.accounts.get_portfolio(current_user)
    return success_response(data.model_dump(), request)
