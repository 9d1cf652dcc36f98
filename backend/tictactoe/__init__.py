"""Tic-Tac-Toe Game Service — REST + GraphQL CRUD over in-memory games.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
