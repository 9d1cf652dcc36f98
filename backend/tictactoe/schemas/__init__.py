"""Pydantic Schemas — request/response validation for the REST endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Wire names are camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain state
"""
