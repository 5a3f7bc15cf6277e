"""Member Rule Enforcement — content checks for member writes.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return ValidationError on violation, None on success
    - Checks run only after the identity gate has admitted the caller
"""

from taskboard.core.errors import ValidationError
from taskboard.core.id_allocation import check_id_in_range


def check_new_identity(new_identity: str) -> ValidationError | None:
    if len(new_identity) == 0:
        return ValidationError("New identity cannot be empty", "new_identity")
    return None


def validate_member_update(member_id: int, new_identity: str) -> ValidationError | None:
    """Chain member update checks. Returns first error or None."""
    return (
        check_id_in_range(member_id, "id")
        or check_new_identity(new_identity)
    )
