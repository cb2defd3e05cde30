"""st_catalog REST endpoints.

GET /stocks            — every tradable stock with its quoted price
GET /stocks/{symbol}   — one stock
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.container import ServiceContainer, get_container
from src.st_catalog.application.schemas import StockItem, StockListResponse
from src.st_common.response import ApiResponse, success_response
from src.st_gateway.auth.dependencies import get_current_user
from src.st_gateway.user.models import User

router = APIRouter(prefix="/stocks", tags=["stocks"])


@router.get("")
async def list_stocks(
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> ApiResponse:
    result = StockListResponse(
        items=[StockItem.from_domain(s) for s in container.catalog.list()]
    )
    return success_response(result.model_dump(), request)


@router.get("/{symbol}")
async def get_stock(
    symbol: str,
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    container: Annotated[ServiceContainer, Depends(get_container)],
) -> ApiResponse:
    stock = container.catalog.require(symbol.upper())
    return success_response(StockItem.from_domain(stock).model_dump(), request)
