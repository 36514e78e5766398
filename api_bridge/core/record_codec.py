"""Record Codec - list decoding and create/update payload building.

Invariants:
    - decode_list is all-or-nothing at the top level: the body must be a JSON
      array, else DecodeFailure
    - Inside the array each record stands alone: a record without a valid
      integer id is skipped, other records are kept
    - build_payload trims names and uses existing_id only when it is nonzero
    - Roles are written as the numeric id_rol
"""

import json
import logging

from pydantic import ValidationError

from api_bridge.core import date_codec
from api_bridge.core.category_maps import parse_role, parse_sex
from api_bridge.core.domain_types import UNSAVED_ID
from api_bridge.core.errors import DecodeFailure, ValidationFailure
from api_bridge.schemas.persona import Person, PersonDraft, PersonPayload

logger = logging.getLogger(__name__)


def decode_list(text: str) -> list[Person]:
    """Decode the body of GET /escuela/persona."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError, TypeError) as e:
        raise DecodeFailure(f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise DecodeFailure(f"expected a JSON array, got {type(data).__name__}")

    people: list[Person] = []
    for index, item in enumerate(data):
        try:
            people.append(Person.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Skipping record %d without a valid id: %s",
                index, e.errors(include_url=False),
            )
    logger.debug("Decoded person list", extra={"record_count": len(people)})
    return people


def validate_draft(draft: PersonDraft) -> None:
    """Raise ValidationFailure if a required name is blank after trimming."""
    missing = [
        name for name, value in (
            ("nombre", draft.first_name),
            ("apellido", draft.last_name),
        )
        if not value.strip()
    ]
    if missing:
        raise ValidationFailure(missing)


def build_payload(draft: PersonDraft, existing_id: int | None) -> PersonPayload:
    """Normalize a draft into the create/update body."""
    return PersonPayload(
        id_persona=existing_id or UNSAVED_ID,
        nombre=draft.first_name.strip(),
        apellido=draft.last_name.strip(),
        sexo=parse_sex(draft.sex).value,
        fh_nac=date_codec.encode(draft.birth_date),
        id_rol=parse_role(draft.role).value,
    )


def encode_payload(payload: PersonPayload) -> str:
    return payload.model_dump_json()
