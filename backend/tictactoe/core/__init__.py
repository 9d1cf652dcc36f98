"""Core Layer — pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, graphql/ or infrastructure/
    - Game records are immutable; every change produces a new record

Design Decisions:
    - Functional core separated from imperative shell
"""
