"""Domain Types — identifier bounds, time units and collection names.

Invariants:
    - Member and task ids are small unsigned integers in 1..MAX_ID; 0 is never assigned
    - Collection names double as id_counters primary keys

Design Decisions:
    - str Enums: serialize to JSON and to DB columns without custom encoders
"""

from enum import Enum


# ─── Constants ───────────────────────────────────────────────────

UNUSED_ID = 0          # sentinel, never assigned
MAX_ID = 255           # unsigned 8-bit identifier range
NANOS_PER_HOUR = 60 * 60 * 1_000_000_000
MIN_DEADLINE_HOURS = 1
MAX_DEADLINE_HOURS = 2**31 - 1   # largest value a 32-bit INTEGER column holds


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """The two persisted collections, each with its own id counter."""
    MEMBERS = "members"
    TASKS = "tasks"
