"""ORM Models — SQLAlchemy declarative models for the persisted collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - members and tasks are independent tables; no foreign key between them

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from taskboard.models.member import Member  # noqa: F401
from taskboard.models.task import Task  # noqa: F401
from taskboard.models.id_counter import IdCounter  # noqa: F401
from taskboard.models.board_owner import BoardOwner  # noqa: F401
