"""Persona Schemas - read model, form draft and write payload.

Invariants:
    - Person is frozen; id is a strict int (no "42", no True, no 42.0)
    - Optional Person fields of unexpected shape become None, never errors
    - Person.sex / Person.role are always enum members or None
    - PersonDraft.sex / .role are always enum members (defaults h / 1)
    - PersonPayload field names are the wire names (id_persona, nombre, ...)

Design Decisions:
    - Wire names as aliases on Person: Python attribute names stay English
    - PersonDraft is a plain dataclass: it is edited field by field by the form
"""

from dataclasses import dataclass, field
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from api_bridge.core import date_codec
from api_bridge.core.category_maps import parse_role, parse_sex
from api_bridge.core.domain_types import Role, Sex


class Person(BaseModel):
    """Person as listed by GET /escuela/persona."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt
    first_name: str | None = Field(None, alias="nombre")
    last_name: str | None = Field(None, alias="apellido")
    sex: Sex | None = Field(None, alias="sexo")
    birth_date: str | None = Field(None, alias="fh_nac")
    role: Role | None = Field(None, alias="rol")

    @field_validator("first_name", "last_name", "birth_date", mode="before")
    @classmethod
    def text_or_none(cls, v: object) -> str | None:
        return v if isinstance(v, str) else None

    @field_validator("sex", mode="before")
    @classmethod
    def decode_sex(cls, v: object) -> Sex | None:
        if not isinstance(v, str):
            return None
        return parse_sex(v)

    @field_validator("role", mode="before")
    @classmethod
    def decode_role(cls, v: object) -> Role | None:
        """Numeric (2, "2") and textual ("Profesor") revisions both accepted."""
        if v is None or isinstance(v, bool) or not isinstance(v, (int, str)):
            return None
        return parse_role(v)

    @property
    def display_name(self) -> str:
        return f"{self.first_name or '—'} {self.last_name or ''}".strip()


@dataclass
class PersonDraft:
    """Editable working copy of a Person, alive while the form is open."""
    first_name: str = ""
    last_name: str = ""
    sex: Sex = Sex.HOMBRE
    birth_date: date = field(default_factory=date.today)
    role: Role = Role.ESTUDIANTE

    @classmethod
    def empty(cls, today: date | None = None) -> "PersonDraft":
        """Create mode."""
        return cls(birth_date=today or date.today())

    @classmethod
    def from_person(cls, person: Person, today: date | None = None) -> "PersonDraft":
        """Edit mode: seed from an existing record, defaulting what is missing."""
        return cls(
            first_name=person.first_name or "",
            last_name=person.last_name or "",
            sex=person.sex or Sex.HOMBRE,
            birth_date=date_codec.decode_or_today(person.birth_date, today),
            role=person.role or Role.ESTUDIANTE,
        )


class PersonPayload(BaseModel):
    """Body of POST/PATCH /escuela/persona."""
    id_persona: int
    nombre: str
    apellido: str
    sexo: str
    fh_nac: str
    id_rol: int
