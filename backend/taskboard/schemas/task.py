"""Task Schemas — request/response shapes for the task routes.

Invariants:
    - TaskCreate accepts empty strings and any integer deadline: content rules
      (non-empty text, deadline >= 1, known assignee) run in core/ after the
      identity gate
    - Missing or mistyped fields fail request decoding (400) before the gate
    - deadline_at and is_overdue are computed per response, never stored
"""

from pydantic import BaseModel

from taskboard.core.records import Task, TaskPayload


class TaskCreate(BaseModel):
    title: str
    description: str
    assigned_to: str
    deadline_hours: int

    def to_payload(self) -> TaskPayload:
        return TaskPayload(
            title=self.title,
            description=self.description,
            assigned_to=self.assigned_to,
            deadline_hours=self.deadline_hours,
        )


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    assigned_to: str
    is_done: bool
    start_time: int
    deadline_hours: int
    deadline_at: int
    is_overdue: bool

    @classmethod
    def from_record(cls, task: Task, now_ns: int) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            assigned_to=task.assigned_to,
            is_done=task.is_done,
            start_time=task.start_time,
            deadline_hours=task.deadline_hours,
            deadline_at=task.deadline_at,
            is_overdue=task.is_overdue(now_ns),
        )
