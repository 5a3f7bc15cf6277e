"""API Dependencies — caller identity, identity gate, and the serialized Board.

Invariants:
    - The caller identity comes from the X-Caller-Identity header, already
      verified upstream; a missing header is the empty (anonymous) identity
    - Every request that touches the stores holds _operation_lock for its whole
      store work: operations run one at a time, to completion
    - The IdentityGate is read from app.state, set once by the lifespan

Design Decisions:
    - One global asyncio.Lock rather than per-store locks: operations touch
      both collections (add_task reads members) and the scale is small
"""

import asyncio
from typing import AsyncGenerator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.config import get_settings
from taskboard.core.identity_gate import IdentityGate
from taskboard.core.storage_limits import StorageLimits
from taskboard.infrastructure.database import get_db
from taskboard.services.board import Board, build_board

CALLER_HEADER = "X-Caller-Identity"

_operation_lock = asyncio.Lock()


async def get_caller(
    x_caller_identity: str = Header("", alias=CALLER_HEADER),
) -> str:
    return x_caller_identity


def get_identity_gate(request: Request) -> IdentityGate:
    gate = getattr(request.app.state, "identity_gate", None)
    if gate is None:
        raise RuntimeError("Board owner not initialized")
    return gate


def get_storage_limits() -> StorageLimits:
    return get_settings().storage_limits


async def get_board(
    db: AsyncSession = Depends(get_db),
    gate: IdentityGate = Depends(get_identity_gate),
    limits: StorageLimits = Depends(get_storage_limits),
) -> AsyncGenerator[Board, None]:
    """Stores for one serialized operation."""
    async with _operation_lock:
        yield build_board(db, gate, limits)
