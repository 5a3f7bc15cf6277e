"""Task ORM — full task record keyed by a small integer id.

Invariants:
    - assigned_to is a plain identity column, not a foreign key: the link to
      members is checked at creation only and never cascaded
    - start_time is nanoseconds since the epoch (BigInteger)
    - The absolute deadline is never stored
"""

from sqlalchemy import BigInteger, Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base


class Task(Base):
    """Task assigned by the administrator to a member."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    assigned_to: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    is_done: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    start_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    deadline_hours: Mapped[int] = mapped_column(Integer, nullable=False)
