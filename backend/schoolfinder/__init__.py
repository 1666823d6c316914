"""School Finder Package — school registry with proximity-sorted listing.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
