"""API Layer — FastAPI routes, assemblers, dependency providers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON (DELETE /cars/{id} returns an empty body)

Design Decisions:
    - Thin routes delegate to services and assemblers
"""
