"""Boundary Protocol - the transport contract the services depend on.

Invariants:
    - Services never import httpx; they see only this Protocol
    - Each method resolves once, to response text or None (the failure signal)
"""

from typing import Protocol


class Transport(Protocol):
    """Text-in/text-out HTTP contract, implemented by infrastructure."""
    async def get(self, path: str) -> str | None: ...
    async def post(self, path: str, body: str) -> str | None: ...
    async def patch(self, path: str, body: str) -> str | None: ...
