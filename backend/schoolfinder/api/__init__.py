"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON with a success flag

Design Decisions:
    - Thin routes delegate to services
"""
