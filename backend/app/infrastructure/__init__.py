"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure imports core/ only for errors and wire formats
    - External calls map transport/status failures to core/errors types
"""
