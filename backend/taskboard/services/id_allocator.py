"""Id Allocator — persisted per-collection counters for new member and task ids.

Invariants:
    - Counter changes are added to the caller's session, never committed here:
      the allocation commits or rolls back together with the insert it serves
    - Callers allocate only after every check has passed, so rejected creations
      never consume an identifier
    - advance_to only moves a counter forward
"""

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.domain_types import Collection, UNUSED_ID
from taskboard.core.id_allocation import next_id
from taskboard.models.id_counter import IdCounter


class IdAllocator:
    """Strictly increasing identifiers, one counter per collection."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _counter(self, collection: Collection) -> IdCounter | None:
        return await self.db.get(IdCounter, collection.value)

    async def last_issued(self, collection: Collection) -> int:
        counter = await self._counter(collection)
        return counter.last_id if counter else UNUSED_ID

    async def next(self, collection: Collection) -> int:
        """Reserve the next identifier. Raises IdSpaceExhaustedError past MAX_ID."""
        counter = await self._counter(collection)
        if counter is None:
            counter = IdCounter(collection=collection.value, last_id=UNUSED_ID)
            self.db.add(counter)
        counter.last_id = next_id(counter.last_id, collection)
        return counter.last_id

    async def advance_to(self, collection: Collection, entry_id: int) -> None:
        """Make sure later allocations never hand out entry_id or anything below it."""
        counter = await self._counter(collection)
        if counter is None:
            self.db.add(IdCounter(collection=collection.value, last_id=entry_id))
        elif counter.last_id < entry_id:
            counter.last_id = entry_id
