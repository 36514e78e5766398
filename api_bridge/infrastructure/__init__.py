"""Infrastructure Layer - HTTP transport and logging setup.

Invariants:
    - Infrastructure never imports from services/
    - Transport failures collapse to a single "no result" signal (None)
"""
