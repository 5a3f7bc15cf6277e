"""Services Layer — async stores over the database session.

Invariants:
    - Every store method returns a core Result (Ok/Err) for expected failures
    - Every check runs before the first write; one commit per mutating call

Design Decisions:
    - One store per collection, plus a stateless query engine over snapshots
"""
