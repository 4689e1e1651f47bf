"""Services Layer — default implementations of the collaborator protocols.

Invariants:
    - Each service wraps one request-scoped AsyncSession
    - Services raise core/errors.py exceptions; they never build HTTP responses
"""
