"""SnapshotUserStore — concrete implementation of UserStoreProtocol.

The whole username -> User map is serialized to one JSON document and kept
in a single `snapshots` row keyed by a fixed resource name. Loading is
forgiving: a missing row means a fresh install, and an unreadable one is
logged and treated the same way. Saving is strict and raises
PersistenceUnavailableError so the caller can decide what to tell the user.
"""

import logging
from datetime import datetime

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from src.st_account.domain.models import Account, Portfolio
from src.st_common import database
from src.st_common.database import Base
from src.st_common.datetime_utils import utc_now
from src.st_common.errors import PersistenceUnavailableError
from src.st_gateway.user.db_models import SnapshotORM
from src.st_gateway.user.models import User
from src.st_gateway.user.schemas import UserRecord, UserSnapshot

logger = logging.getLogger("st.snapshot")


class SnapshotUserStore:
    def __init__(
        self,
        session_factory: sessionmaker[Session] | None = None,
        key: str | None = None,
    ) -> None:
        self._session_factory = session_factory or database.session_factory
        self._key = key or settings.SNAPSHOT_KEY
        self._schema_ready = False

    def load_all(self) -> dict[str, User]:
        try:
            self._ensure_schema()
            with self._session_factory() as session:
                payload = session.scalar(
                    select(SnapshotORM.payload).where(SnapshotORM.name == self._key)
                )
        except SQLAlchemyError as exc:
            logger.warning("Snapshot %r unreadable, starting empty: %s", self._key, exc)
            return {}

        if payload is None:
            logger.info("No snapshot %r yet, starting empty", self._key)
            return {}

        try:
            snapshot = UserSnapshot.model_validate_json(payload)
            users = {r.username: _record_to_user(r) for r in snapshot.users}
        except (ValidationError, ValueError) as exc:
            logger.warning("Snapshot %r is corrupt, starting empty: %s", self._key, exc)
            return {}

        logger.info("Loaded %d users from snapshot %r", len(users), self._key)
        return users

    def save_all(self, users: dict[str, User]) -> None:
        snapshot = UserSnapshot(users=[UserRecord.from_domain(u) for u in users.values()])
        try:
            self._ensure_schema()
            with self._session_factory() as session, session.begin():
                session.merge(
                    SnapshotORM(
                        name=self._key,
                        payload=snapshot.model_dump_json(),
                        updated_at=utc_now(),
                    )
                )
        except SQLAlchemyError as exc:
            raise PersistenceUnavailableError(str(exc)) from exc

        logger.debug("Saved %d users to snapshot %r", len(users), self._key)

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        with self._session_factory() as session:
            Base.metadata.create_all(session.get_bind(), tables=[SnapshotORM.__table__])
        self._schema_ready = True


def _record_to_user(record: UserRecord) -> User:
    return User(
        username=record.username,
        password_hash=record.password_hash,
        account=Account(balance_cents=record.balance_cents),
        portfolio=Portfolio(holdings=dict(record.portfolio)),
        created_at=datetime.fromisoformat(record.created_at),
    )
