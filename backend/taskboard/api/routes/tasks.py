"""Task Routes — HTTP surface of the task store and query engine.

Invariants:
    - add/delete are admin only; complete admits the admin or the assignee
    - /personal and /search never fail for lack of matches ([] instead), while
      the bare listing reports an empty collection as 404 EMPTY_COLLECTION
    - Fixed paths are declared before /{task_id}
"""

import time

from fastapi import APIRouter, Depends, Query, status

from taskboard.api.dependencies import get_board, get_caller
from taskboard.core.result import unwrap
from taskboard.schemas.common import IdResponse, MessageResponse
from taskboard.schemas.task import TaskCreate, TaskResponse
from taskboard.services.board import Board

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


def _respond(tasks) -> list[TaskResponse]:
    now_ns = time.time_ns()
    return [TaskResponse.from_record(task, now_ns) for task in tasks]


@router.post(
    "", response_model=IdResponse, status_code=status.HTTP_201_CREATED,
)
async def add_task(
    body: TaskCreate,
    caller: str = Depends(get_caller),
    board: Board = Depends(get_board),
):
    return IdResponse(id=unwrap(await board.tasks.add(caller, body.to_payload())))


@router.get("", response_model=list[TaskResponse])
async def list_tasks(board: Board = Depends(get_board)):
    return _respond(unwrap(await board.tasks.list_all()))


@router.get("/personal", response_model=list[TaskResponse])
async def personal_tasks(
    identity: str = Query(...),
    is_done: bool = Query(...),
    board: Board = Depends(get_board),
):
    return _respond(await board.queries.personal_tasks(identity, is_done))


@router.get("/search", response_model=list[TaskResponse])
async def search_tasks(
    q: str = Query(...), board: Board = Depends(get_board),
):
    return _respond(await board.queries.search_tasks(q))


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, board: Board = Depends(get_board)):
    task = unwrap(await board.tasks.get(task_id))
    return TaskResponse.from_record(task, time.time_ns())


@router.post("/{task_id}/complete", response_model=IdResponse)
async def complete_task(
    task_id: int,
    caller: str = Depends(get_caller),
    board: Board = Depends(get_board),
):
    return IdResponse(id=unwrap(await board.tasks.complete(caller, task_id)))


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int,
    caller: str = Depends(get_caller),
    board: Board = Depends(get_board),
):
    return MessageResponse(message=unwrap(await board.tasks.remove(caller, task_id)))
