"""Services Layer — game orchestration over an injected store.

Invariants:
    - Services never import from api/ or graphql/
    - "Not found" is signalled by returning None, never by raising

Design Decisions:
    - Adapters (REST, GraphQL) decide how a miss is surfaced to their clients
"""
