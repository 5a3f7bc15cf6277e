"""Records — immutable domain snapshots of members and tasks.

Invariants:
    - Records are frozen: a store hands out snapshots, never live rows
    - Task.start_time is nanoseconds since the epoch, captured at creation
    - Absolute deadline is derived on demand, never stored

Design Decisions:
    - Dataclasses over ORM rows in core/: query filters and validation stay pure
      and testable without a database
"""

from dataclasses import asdict, dataclass

from taskboard.core.domain_types import NANOS_PER_HOUR


@dataclass(frozen=True)
class Member:
    id: int
    identity: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TaskPayload:
    """Admin-supplied fields of a new task, before validation."""
    title: str
    description: str
    assigned_to: str
    deadline_hours: int


@dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: str
    assigned_to: str
    is_done: bool
    start_time: int
    deadline_hours: int

    @property
    def deadline_at(self) -> int:
        """Absolute deadline in nanoseconds since the epoch."""
        return absolute_deadline(self.start_time, self.deadline_hours)

    def is_overdue(self, now_ns: int) -> bool:
        return not self.is_done and now_ns > self.deadline_at

    def to_dict(self) -> dict:
        return asdict(self)


def absolute_deadline(start_time: int, deadline_hours: int) -> int:
    """Convert a relative deadline in hours to an absolute nanosecond timestamp."""
    return start_time + deadline_hours * NANOS_PER_HOUR
