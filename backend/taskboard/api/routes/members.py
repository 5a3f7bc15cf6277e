"""Member Routes — HTTP surface of the member store.

Invariants:
    - add/update/delete forward the caller identity; the store's gate decides
    - Err results are raised and rendered by the TaskboardError handler
    - /check is declared before /{member_id} so it is not parsed as an id
"""

from fastapi import APIRouter, Depends, Query, status

from taskboard.api.dependencies import get_board, get_caller
from taskboard.core.result import unwrap
from taskboard.schemas.common import IdResponse, MessageResponse
from taskboard.schemas.member import (
    MemberCreate, MemberResponse, MemberUpdate, MembershipResponse,
)
from taskboard.services.board import Board

router = APIRouter(prefix="/api/v1/members", tags=["members"])


@router.post(
    "", response_model=IdResponse, status_code=status.HTTP_201_CREATED,
)
async def add_member(
    body: MemberCreate,
    caller: str = Depends(get_caller),
    board: Board = Depends(get_board),
):
    return IdResponse(id=unwrap(await board.members.add(caller, body.identity)))


@router.get("", response_model=list[MemberResponse])
async def list_members(board: Board = Depends(get_board)):
    members = unwrap(await board.members.list_all())
    return [MemberResponse.from_record(m) for m in members]


@router.get("/check", response_model=MembershipResponse)
async def is_member(
    identity: str = Query(...), board: Board = Depends(get_board),
):
    return MembershipResponse(
        identity=identity, is_member=await board.members.is_member(identity),
    )


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(member_id: int, board: Board = Depends(get_board)):
    return MemberResponse.from_record(unwrap(await board.members.get(member_id)))


@router.put("/{member_id}", response_model=IdResponse)
async def update_member(
    member_id: int,
    body: MemberUpdate,
    caller: str = Depends(get_caller),
    board: Board = Depends(get_board),
):
    """Overwrite a member's identity. An absent id is created, not rejected."""
    result = await board.members.update(caller, member_id, body.new_identity)
    return IdResponse(id=unwrap(result))


@router.delete("/{member_id}", response_model=MessageResponse)
async def delete_member(
    member_id: int,
    caller: str = Depends(get_caller),
    board: Board = Depends(get_board),
):
    """Delete a member. Tasks still assigned to it keep their assigned_to."""
    message = unwrap(await board.members.remove(caller, member_id))
    return MessageResponse(message=message)
