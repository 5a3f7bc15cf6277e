"""Query Engine — stateless read-side operations over task snapshots.

Invariants:
    - Never mutates; never fails for lack of matches (empty list instead)
    - Results keep task id order
"""

from taskboard.core.records import Task
from taskboard.core.task_queries import filter_personal, filter_search
from taskboard.services.task_store import TaskStore


class QueryEngine:
    def __init__(self, tasks: TaskStore):
        self.tasks = tasks

    async def personal_tasks(self, identity: str, is_done: bool) -> list[Task]:
        """Tasks assigned to identity whose completion state equals is_done."""
        return filter_personal(await self.tasks.snapshot(), identity, is_done)

    async def search_tasks(self, text: str) -> list[Task]:
        """Tasks whose title or description contains text, ignoring case."""
        return filter_search(await self.tasks.snapshot(), text)
