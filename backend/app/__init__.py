"""Indicaciones Relay — drafts Chilean "Propuestas de Indicaciones" via Gemini.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
