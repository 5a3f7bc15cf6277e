"""Task Rule Enforcement — content checks for task creation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return ValidationError on violation, None on success
    - Assignee membership is checked once, at creation; it is a weak reference
      afterwards and is never re-validated
    - validate_task_payload chains all checks — first error wins

Design Decisions:
    - Membership passed in as a bool: the store answers is_member, the rule
      stays free of IO
"""

from taskboard.core.domain_types import MAX_DEADLINE_HOURS, MIN_DEADLINE_HOURS
from taskboard.core.errors import ValidationError
from taskboard.core.records import TaskPayload


def check_text_fields(payload: TaskPayload) -> ValidationError | None:
    if len(payload.title) == 0:
        return ValidationError("Title cannot be empty", "title")
    if len(payload.description) == 0:
        return ValidationError("Description cannot be empty", "description")
    return None


def check_deadline(payload: TaskPayload) -> ValidationError | None:
    if payload.deadline_hours < MIN_DEADLINE_HOURS:
        return ValidationError(
            f"Deadline must be at least {MIN_DEADLINE_HOURS} hour",
            "deadline_hours",
        )
    if payload.deadline_hours > MAX_DEADLINE_HOURS:
        return ValidationError(
            f"Deadline cannot exceed {MAX_DEADLINE_HOURS} hours",
            "deadline_hours",
        )
    return None


def check_assignee(assignee_is_member: bool) -> ValidationError | None:
    if not assignee_is_member:
        return ValidationError("Assigned member does not exist", "assigned_to")
    return None


def validate_task_payload(
    payload: TaskPayload, assignee_is_member: bool,
) -> ValidationError | None:
    """Chain all task creation checks. Returns first error or None."""
    return (
        check_text_fields(payload)
        or check_deadline(payload)
        or check_assignee(assignee_is_member)
    )
