"""Identity Gate — the single authorization check shared by every mutating operation.

Invariants:
    - The administrator identity is fixed at construction; the gate is immutable
    - Identities are compared by exact equality; the empty identity is never admin
    - Checks return an AuthorizationError value (or None), they never raise

Design Decisions:
    - One gate object injected per request instead of scattered identity
      comparisons: every store asks the same question the same way
    - Return errors (not exceptions): stores wrap them in Err before any read or
      write, so authorization always wins over validation
"""

from dataclasses import dataclass

from taskboard.core.errors import AuthorizationError, ErrorContext


@dataclass(frozen=True)
class IdentityGate:
    """Binary admin/non-admin policy over one configured administrator identity."""

    admin_identity: str

    def __post_init__(self):
        if not self.admin_identity:
            raise ValueError("admin_identity cannot be empty")

    def is_admin(self, caller: str) -> bool:
        return caller == self.admin_identity

    def require_admin(self, caller: str, action: str) -> AuthorizationError | None:
        """Return an AuthorizationError unless caller is the administrator."""
        if self.is_admin(caller):
            return None
        return AuthorizationError(
            f"You are not authorized to {action}",
            ErrorContext(caller=caller, operation=action),
        )

    def require_admin_or(
        self, caller: str, allowed: str, action: str,
    ) -> AuthorizationError | None:
        """Like require_admin, but also admits the one identity `allowed`."""
        if self.is_admin(caller) or (caller and caller == allowed):
            return None
        return AuthorizationError(
            f"You are not authorized to {action}",
            ErrorContext(caller=caller, operation=action),
        )
