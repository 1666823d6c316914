"""Service Layer — orchestrates pure core logic around repository IO.

Invariants:
    - Services hold no state across calls; the repository is injected per request
    - Services never catch ValidationError or StorageError; the API layer maps them
"""
