"""Domain Types - closed enums and identity types for Person records.

Invariants:
    - Sex and Role are closed: every value in the system is a member
    - PersonId 0 means "not yet created" (server assigns real ids)
    - SyncState terminal states: REJECTED, COMPLETED, FAILED

Design Decisions:
    - str/int Enums: the member value IS the wire code, no custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", int)

UNSAVED_ID = PersonId(0)


# ─── Enums ───────────────────────────────────────────────────────

class Sex(str, Enum):
    """Sex code as stored by the service (`sexo`)."""
    HOMBRE = "h"
    MUJER = "m"
    OTRO = "o"


class Role(int, Enum):
    """Role id as stored by the service (`id_rol`)."""
    ESTUDIANTE = 1
    PROFESOR = 2
    OTRO = 3


class SyncState(str, Enum):
    """Lifecycle of a single save invocation."""
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SyncState.REJECTED, SyncState.COMPLETED, SyncState.FAILED)
