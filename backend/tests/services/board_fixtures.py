"""Shared helpers for store and route tests."""

from taskboard.api.dependencies import CALLER_HEADER
from taskboard.services.board import Board
from taskboard.services.id_allocator import IdAllocator
from taskboard.services.member_store import MemberStore
from taskboard.services.query_engine import QueryEngine
from taskboard.services.task_store import TaskStore

ADMIN = "admin-A"
FIXED_NOW_NS = 1_700_000_000_000_000_000


def make_board(db, gate, limits, clock=lambda: FIXED_NOW_NS) -> Board:
    """Board with a pinned clock."""
    allocator = IdAllocator(db)
    members = MemberStore(db, gate, allocator, limits)
    tasks = TaskStore(db, gate, allocator, members, limits, clock=clock)
    return Board(gate=gate, members=members, tasks=tasks, queries=QueryEngine(tasks))


def as_caller(identity: str) -> dict:
    return {CALLER_HEADER: identity}
