"""Infrastructure Layer — database session management and structured logging.

Invariants:
    - Infrastructure never imports core/ domain logic beyond the error types
    - All database failures are mapped to DatabaseError
"""
