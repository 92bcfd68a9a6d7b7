"""Pydantic Schemas — request/response bodies for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input)
"""
