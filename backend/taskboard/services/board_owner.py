"""Board Owner — one-time initialization of the administrator identity.

Invariants:
    - The first initialization persists the owner; it is never rewritten
    - A later initialization with a different identity keeps the stored owner
      and logs a warning
    - The returned IdentityGate is the only authority on who the admin is
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.core.identity_gate import IdentityGate
from taskboard.models.board_owner import BoardOwner, OWNER_ROW_ID

logger = logging.getLogger(__name__)


async def initialize_owner(db: AsyncSession, admin_identity: str) -> IdentityGate:
    """Persist admin_identity as owner unless one exists; build the gate from the stored owner."""
    owner = await db.get(BoardOwner, OWNER_ROW_ID)
    if owner is None:
        owner = BoardOwner(id=OWNER_ROW_ID, identity=admin_identity)
        db.add(owner)
        await db.commit()
        logger.info("Board owner initialized", extra={"caller": admin_identity})
    elif owner.identity != admin_identity:
        logger.warning(
            "Configured admin identity differs from stored owner; keeping stored owner",
            extra={"caller": owner.identity},
        )
    return IdentityGate(owner.identity)
