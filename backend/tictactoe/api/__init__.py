"""API Layer — FastAPI routes, GraphQL schema and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - REST and GraphQL share one GameService instance per application

Design Decisions:
    - Thin adapters delegate to services; they only translate "not found"
"""
