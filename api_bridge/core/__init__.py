"""Core Layer - pure codecs, category tables and the error taxonomy.

Invariants:
    - No IO: nothing in core/ opens sockets or reads settings
    - core/ never imports from infrastructure/ or services/
"""
