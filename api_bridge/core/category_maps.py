"""Category Maps - code <-> display label tables for sex and role.

Invariants:
    - Every function is total: unrecognized input maps to a fixed default
    - Label matching is case-insensitive and ignores surrounding whitespace
    - sex_code(sex_display(c)) == c for every Sex code; same for roles

Defaults:
    - sex_display -> "Hombre", sex_code -> "o", parse_sex -> Sex.HOMBRE
    - role_display -> "Estudiante", role_id -> 1, parse_role -> Role.ESTUDIANTE
"""

from api_bridge.core.domain_types import Role, Sex

_SEX_LABELS: dict[Sex, str] = {
    Sex.HOMBRE: "Hombre",
    Sex.MUJER: "Mujer",
    Sex.OTRO: "Otro",
}

_ROLE_LABELS: dict[Role, str] = {
    Role.ESTUDIANTE: "Estudiante",
    Role.PROFESOR: "Profesor",
    Role.OTRO: "Otro",
}

_SEX_BY_LABEL = {label.lower(): sex for sex, label in _SEX_LABELS.items()}
_ROLE_BY_LABEL = {label.lower(): role for role, label in _ROLE_LABELS.items()}

# Picker order
SEX_OPTIONS: tuple[str, ...] = tuple(_SEX_LABELS.values())
ROLE_OPTIONS: tuple[str, ...] = tuple(_ROLE_LABELS.values())


def _normalize(value: object) -> str:
    return value.strip().lower() if isinstance(value, str) else ""


def _sex_from_code(code: object) -> Sex | None:
    try:
        return Sex(_normalize(code))
    except ValueError:
        return None


def _role_from_code(code: object) -> Role | None:
    """Accept an int or a numeric string. bool is not a role id."""
    if isinstance(code, bool) or not isinstance(code, (int, str)):
        return None
    if isinstance(code, str):
        code = code.strip()
        if not code.isdigit():
            return None
    try:
        return Role(int(code))
    except ValueError:
        return None


# --- sex ---------------------------------------------------------------------

def sex_display(code: object) -> str:
    """h -> Hombre, m -> Mujer, o -> Otro; anything else -> Hombre."""
    sex = _sex_from_code(code) or Sex.HOMBRE
    return _SEX_LABELS[sex]


def sex_code(display: object) -> str:
    """Inverse of sex_display on the label; anything unrecognized -> "o"."""
    sex = _SEX_BY_LABEL.get(_normalize(display), Sex.OTRO)
    return sex.value


def parse_sex(value: object) -> Sex:
    """Tolerant decode of a code ("m") or a label ("Mujer")."""
    if isinstance(value, Sex):
        return value
    return (
        _sex_from_code(value)
        or _SEX_BY_LABEL.get(_normalize(value))
        or Sex.HOMBRE
    )


# --- role --------------------------------------------------------------------

def role_display(code: object) -> str:
    """1 -> Estudiante, 2 -> Profesor, 3 -> Otro; anything else -> Estudiante."""
    role = _role_from_code(code) or _ROLE_BY_LABEL.get(_normalize(code))
    return _ROLE_LABELS[role or Role.ESTUDIANTE]


def role_id(display: object) -> int:
    """Inverse of role_display on the label; anything unrecognized -> 1."""
    role = _ROLE_BY_LABEL.get(_normalize(display), Role.ESTUDIANTE)
    return role.value


def parse_role(value: object) -> Role:
    """Tolerant decode: 2, "2" and "Profesor" all give Role.PROFESOR."""
    if isinstance(value, Role):
        return value
    return (
        _role_from_code(value)
        or _ROLE_BY_LABEL.get(_normalize(value))
        or Role.ESTUDIANTE
    )
