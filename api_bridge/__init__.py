"""Api Bridge - client for the escuela Person service.

Invariants:
    - Package root contains no executable code (no import side-effects)
"""
