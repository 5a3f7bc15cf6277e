"""Identifier Arithmetic — pure rules behind the per-collection id counters.

Invariants:
    - Identifiers start at 1; 0 (UNUSED_ID) is never handed out
    - next_id is strictly greater than the last issued id, so ids are never reused
    - Past MAX_ID allocation fails with IdSpaceExhaustedError (raised: the
      collection cannot grow any further, retrying will not help)
"""

from taskboard.core.domain_types import MAX_ID, UNUSED_ID, Collection
from taskboard.core.errors import IdSpaceExhaustedError, ValidationError


def next_id(last_id: int, collection: Collection) -> int:
    """Identifier following last_id, or raise when the id space is used up."""
    candidate = max(last_id, UNUSED_ID) + 1
    if candidate > MAX_ID:
        raise IdSpaceExhaustedError(collection.value, MAX_ID)
    return candidate


def check_id_in_range(entry_id: int, field: str = "id") -> ValidationError | None:
    """Caller-supplied identifiers must lie in 1..MAX_ID."""
    if entry_id <= UNUSED_ID or entry_id > MAX_ID:
        return ValidationError(
            f"Identifier must be between 1 and {MAX_ID}", field,
        )
    return None
