"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Failures leave the API as {"error": message}

Design Decisions:
    - Thin routes delegate to services
"""
