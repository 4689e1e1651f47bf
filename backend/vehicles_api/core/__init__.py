"""Core Layer — error hierarchy, domain types and collaborator contracts.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Nothing here performs IO
"""
