"""Member ORM — one registered identity per small integer id.

Invariants:
    - id is assigned by the member id counter, never by the database
    - identity is opaque text; duplicates across ids are allowed

Design Decisions:
    - autoincrement disabled: ids must survive deletions without reuse, which the
      id_counters table guarantees across every backend
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base


class Member(Base):
    """Registered team member."""
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    identity: Mapped[str] = mapped_column(Text, nullable=False)
