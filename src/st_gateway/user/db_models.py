"""SQLAlchemy ORM model for the snapshots table.

One row per named snapshot; the payload is an opaque JSON document.
The table is created on first use by SnapshotUserStore.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.st_common.database import Base
from src.st_common.datetime_utils import utc_now


class SnapshotORM(Base):
    __tablename__ = "snapshots"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
