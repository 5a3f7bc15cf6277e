"""IdCounter ORM — last issued identifier per collection.

Invariants:
    - One row per Collection value; missing row means nothing issued yet (0)
    - last_id only grows
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base


class IdCounter(Base):
    __tablename__ = "id_counters"

    collection: Mapped[str] = mapped_column(String(20), primary_key=True)
    last_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
