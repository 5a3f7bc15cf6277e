"""Storage Limits — per-collection bounds on entry count and record size.

Invariants:
    - A collection never holds more than max_entries records
    - A record's JSON serialization never exceeds max_value_bytes (UTF-8)
    - Violations raise StorageLimitExceededError; nothing is truncated

Design Decisions:
    - Raised, not returned: a full store is a deployment limit, not a caller
      mistake that a corrected request could fix
    - JSON size over ORM column sizes: the bound is on the whole record, the way
      a stable key-value map bounds its serialized values
"""

import json
from dataclasses import dataclass

from taskboard.core.errors import StorageLimitExceededError


@dataclass(frozen=True)
class StorageLimits:
    max_entries: int = 100
    max_value_bytes: int = 1000


def serialized_size(record: dict) -> int:
    return len(json.dumps(record, ensure_ascii=False).encode("utf-8"))


def check_capacity(limits: StorageLimits, current_entries: int, collection: str) -> None:
    """Raise when one more entry would exceed the collection bound."""
    if current_entries + 1 > limits.max_entries:
        raise StorageLimitExceededError(
            f"{collection} is full ({limits.max_entries} entries)",
            limits.max_entries,
        )


def check_value_size(limits: StorageLimits, record: dict, collection: str) -> None:
    """Raise when the serialized record exceeds the value size bound."""
    size = serialized_size(record)
    if size > limits.max_value_bytes:
        raise StorageLimitExceededError(
            f"{collection} record is {size} bytes "
            f"(limit {limits.max_value_bytes})",
            limits.max_value_bytes,
        )
