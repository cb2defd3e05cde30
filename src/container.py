"""ServiceContainer — every long-lived service, built once per process.

main.py attaches the container to `app.state`; routers reach it through
the `get_container` dependency. Nothing lives in module globals.
"""

from dataclasses import dataclass

from fastapi import Request

from src.st_account.application.service import AccountApplicationService
from src.st_catalog.domain.catalog import StockCatalog
from src.st_gateway.user.directory import UserDirectory
from src.st_gateway.user.repository import UserStoreProtocol
from src.st_gateway.user.service import AuthApplicationService
from src.st_gateway.user.snapshot_store import SnapshotUserStore
from src.st_trading.application.service import TradingApplicationService
from src.st_trading.domain.engine import TradingEngine
from src.st_trading.domain.transaction_log import TransactionLog


@dataclass
class ServiceContainer:
    catalog: StockCatalog
    directory: UserDirectory
    transaction_log: TransactionLog
    engine: TradingEngine
    auth: AuthApplicationService
    accounts: AccountApplicationService
    trading: TradingApplicationService


def build_container(
    store: UserStoreProtocol | None = None,
    catalog: StockCatalog | None = None,
) -> ServiceContainer:
    """Wire the services. Loads the user snapshot through `store`."""
    catalog = catalog or StockCatalog.with_defaults()
    directory = UserDirectory(store or SnapshotUserStore())
    log = TransactionLog()
    engine = TradingEngine(catalog, log)
    return ServiceContainer(
        catalog=catalog,
        directory=directory,
        transaction_log=log,
        engine=engine,
        auth=AuthApplicationService(directory),
        accounts=AccountApplicationService(catalog),
        trading=TradingApplicationService(engine, log),
    )


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency: the container attached at startup."""
    return request.app.state.container
