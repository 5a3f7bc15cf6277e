"""BoardOwner ORM — the administrator identity, written once at initialization.

Invariants:
    - At most one row (id == 1)
    - Never updated after insert
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base

OWNER_ROW_ID = 1


class BoardOwner(Base):
    __tablename__ = "board_owner"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False, default=OWNER_ROW_ID,
    )
    identity: Mapped[str] = mapped_column(Text, nullable=False)
    initialized_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
