"""Owner — exposes the administrator identity fixed at initialization."""

from fastapi import APIRouter, Depends

from taskboard.api.dependencies import get_identity_gate
from taskboard.core.identity_gate import IdentityGate
from taskboard.schemas.common import OwnerResponse

router = APIRouter(prefix="/api/v1/owner", tags=["owner"])


@router.get("", response_model=OwnerResponse)
async def get_owner(gate: IdentityGate = Depends(get_identity_gate)):
    return OwnerResponse(identity=gate.admin_identity)
