"""Infrastructure Layer — storage implementation and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; it holds no business rules

Design Decisions:
    - In-memory store only: persistence beyond process lifetime is out of scope
"""
