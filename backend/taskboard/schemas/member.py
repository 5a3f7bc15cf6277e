"""Member Schemas — request/response shapes for the member routes.

Invariants:
    - No content constraints on request fields: an unauthorized caller gets 403
      even when the content would also fail a rule
    - A body that is missing a field or has the wrong type is rejected with 400
      before the operation runs, so before the identity gate
"""

from pydantic import BaseModel

from taskboard.core.records import Member


class MemberCreate(BaseModel):
    identity: str


class MemberUpdate(BaseModel):
    new_identity: str


class MemberResponse(BaseModel):
    id: int
    identity: str

    @classmethod
    def from_record(cls, member: Member) -> "MemberResponse":
        return cls(id=member.id, identity=member.identity)


class MembershipResponse(BaseModel):
    identity: str
    is_member: bool
