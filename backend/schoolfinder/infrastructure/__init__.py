"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never leaks driver exceptions; all map to core/errors.py
"""
