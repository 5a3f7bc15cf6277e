"""Task Queries — pure filters behind personalTasks and searchTasks.

Invariants:
    - Filters never fail: no match yields an empty list, unlike the listing
      operations which report an empty collection as an error
    - Input order is preserved (stores hand snapshots over in id order)
    - Search is a case-insensitive substring match on title or description

Design Decisions:
    - Linear scans over the full snapshot: collections are bounded to a few
      hundred entries. An index by assignee would be needed if that bound grows.
"""

from collections.abc import Iterable

from taskboard.core.records import Task


def filter_personal(tasks: Iterable[Task], identity: str, is_done: bool) -> list[Task]:
    return [
        task for task in tasks
        if task.assigned_to == identity and task.is_done == is_done
    ]


def matches_text(task: Task, text: str) -> bool:
    needle = text.lower()
    return needle in task.title.lower() or needle in task.description.lower()


def filter_search(tasks: Iterable[Task], text: str) -> list[Task]:
    return [task for task in tasks if matches_text(task, text)]
