"""Vehicles API Package — REST service for cars and manufacturers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
