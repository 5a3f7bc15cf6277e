"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Request schemas accept any string/int content: authorization is always
      evaluated before content validation, so content rules live in core/
    - Response schemas are built from core records, never from ORM rows

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
