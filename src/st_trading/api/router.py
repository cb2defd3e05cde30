"""st_trading REST API — buy, sell, history. All require JWT authentication."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.container import ServiceContainer, get_container
from src.st_common.response import ApiResponse, success_response
from src.st_gateway.auth.dependencies import get_current_user
from src.st_gateway.user.models import User
from src.st_trading.application.schemas import TradeRequest

router = APIRouter(prefix="/trades", tags=["trades"])


@router.post("/buy")
async def buy(
    body: TradeRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
    request: Request,
) -> ApiResponse:
    data = container.trading.buy(current_user, body.symbol, body.quantity)
    return success_response(data.model_dump(), request)


@router.post("/sell")
async def sell(
    body: TradeRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
    request: Request,
) -> ApiResponse:
    data = container.trading.sell(current_user, body.symbol, body.quantity)
    return success_response(data.model_dump(), request)


@router.get("/history")
async def history(
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
    request: Request,
) -> ApiResponse:
    data = container.trading.history(current_user)
    return success_response(data.model_dump(), request)
