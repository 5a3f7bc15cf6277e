"""Rule Enforcement — tests for pure member and task validation.

Tests cover:
    - Task text fields must be non-empty
    - Deadline must be at least one hour and fit a 32-bit INTEGER column
    - Assignee must be a member at creation
    - validate_task_payload reports the first failing rule
    - Member updates need an in-range id and a non-empty identity
"""

from taskboard.core.enforce_members import check_new_identity, validate_member_update
from taskboard.core.enforce_tasks import (
    check_assignee,
    check_deadline,
    check_text_fields,
    validate_task_payload,
)
from taskboard.core.domain_types import MAX_DEADLINE_HOURS
from taskboard.core.errors import ValidationError
from taskboard.core.records import TaskPayload


def _payload(**overrides) -> TaskPayload:
    fields = {
        "title": "Report",
        "description": "Q3 numbers",
        "assigned_to": "P1",
        "deadline_hours": 5,
    }
    fields.update(overrides)
    return TaskPayload(**fields)


# ─── task rules ──────────────────────────────────────────────────

def test_valid_payload_passes():
    assert validate_task_payload(_payload(), assignee_is_member=True) is None


def test_empty_title_fails():
    error = check_text_fields(_payload(title=""))
    assert isinstance(error, ValidationError)
    assert error.field == "title"


def test_empty_description_fails():
    error = check_text_fields(_payload(description=""))
    assert error.field == "description"


def test_whitespace_title_is_not_empty():
    assert check_text_fields(_payload(title=" ")) is None


def test_zero_deadline_fails():
    error = check_deadline(_payload(deadline_hours=0))
    assert error.field == "deadline_hours"


def test_one_hour_deadline_passes():
    assert check_deadline(_payload(deadline_hours=1)) is None


def test_largest_storable_deadline_passes():
    assert check_deadline(_payload(deadline_hours=MAX_DEADLINE_HOURS)) is None


def test_deadline_past_column_range_fails():
    error = check_deadline(_payload(deadline_hours=MAX_DEADLINE_HOURS + 1))
    assert isinstance(error, ValidationError)
    assert error.field == "deadline_hours"


def test_unknown_assignee_fails():
    error = check_assignee(False)
    assert error.field == "assigned_to"
    assert error.message == "Assigned member does not exist"


def test_first_failing_rule_wins():
    error = validate_task_payload(
        _payload(title="", deadline_hours=0), assignee_is_member=False,
    )
    assert error.field == "title"


def test_deadline_checked_before_assignee():
    error = validate_task_payload(_payload(deadline_hours=0), assignee_is_member=False)
    assert error.field == "deadline_hours"


# ─── member rules ────────────────────────────────────────────────

def test_empty_new_identity_fails():
    error = check_new_identity("")
    assert isinstance(error, ValidationError)
    assert error.field == "new_identity"


def test_member_update_passes():
    assert validate_member_update(3, "P9") is None


def test_member_update_with_zero_id_fails():
    assert validate_member_update(0, "P9").field == "id"
