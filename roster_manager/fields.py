from __future__ import annotations

"""Validators and constructors for the individual person fields.

Each field exposes a predicate (``is_valid_*``), a ``validate_*`` function that
returns a :class:`FieldResult`, and a ``parse_*`` helper that unwraps the
result and raises :class:`ValidationError` on failure. Optional fields also
get ``parse_optional_*`` which accepts the empty string as "unset".

All helpers trim leading/trailing whitespace before checking and never mutate
their input.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from .config import EMAIL_DOMAIN
from .errors import ValidationError
from .schema import (
    FIELD_EMAIL,
    FIELD_GROUP,
    FIELD_MAJOR,
    FIELD_NAME,
    FIELD_STUDENT_ID,
    FIELD_YEAR,
)

# Sentinel for optional fields that carry no value
UNSET = ""

NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
STUDENT_ID_CONSTRAINTS = (
    "Student IDs should start with 'A', followed by 7 digits and end with an uppercase letter, e.g. A0123456X"
)
NET_ID_CONSTRAINTS = "NetIDs should start with 'e' followed by exactly 7 digits, e.g. e1234567"
MAJOR_CONSTRAINTS = (
    "Majors should start with a letter, contain only letters, spaces, '&', '-' or ',', "
    "and be at most 50 characters long"
)
YEAR_CONSTRAINTS = "Year should be a single digit from 1 to 6"
GROUP_CONSTRAINTS = (
    "Group names should only contain alphanumeric characters and single spaces, "
    "and be at most 30 characters long"
)

_NAME_RE = re.compile(r"[A-Za-z0-9]+( [A-Za-z0-9]+)*")
_STUDENT_ID_RE = re.compile(r"A\d{7}[A-Z]")
_NET_ID_RE = re.compile(r"e\d{7}")
_MAJOR_RE = re.compile(r"[A-Za-z][A-Za-z &,\-]{0,49}")
_YEAR_RE = re.compile(r"[1-6]")
_GROUP_RE = re.compile(r"[A-Za-z0-9]+( [A-Za-z0-9]+)*")
_GROUP_MAX_LENGTH = 30


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating one raw field value."""

    value: Optional[str] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the validated value or raise the captured error."""

        if self.error is not None:
            raise self.error
        return self.value or UNSET


def _fail(field: str, message: str) -> FieldResult:
    return FieldResult(error=ValidationError(field, message))


# ------------------------------
# Predicates
# ------------------------------


def is_valid_name(value: str) -> bool:
    return bool(_NAME_RE.fullmatch(value))


def is_valid_student_id(value: str) -> bool:
    return bool(_STUDENT_ID_RE.fullmatch(value))


def is_valid_net_id(value: str) -> bool:
    return bool(_NET_ID_RE.fullmatch(value))


def is_valid_email(value: str) -> bool:
    """Return True for ``<netid><domain>``, the stored form of an email."""

    if not value.endswith(EMAIL_DOMAIN):
        return False
    return is_valid_net_id(value[: len(value) - len(EMAIL_DOMAIN)])


def is_valid_major(value: str) -> bool:
    return bool(_MAJOR_RE.fullmatch(value))


def is_valid_year(value: str) -> bool:
    return bool(_YEAR_RE.fullmatch(value))


def is_valid_group(value: str) -> bool:
    return len(value) <= _GROUP_MAX_LENGTH and bool(_GROUP_RE.fullmatch(value))


# ------------------------------
# Validation
# ------------------------------


def _validator(field: str, predicate: Callable[[str], bool], message: str) -> Callable[[str], FieldResult]:
    def validate(raw: str) -> FieldResult:
        trimmed = raw.strip()
        if not predicate(trimmed):
            return _fail(field, message)
        return FieldResult(value=trimmed)

    validate.__name__ = f"validate_{field.lower()}"
    return validate


validate_name = _validator(FIELD_NAME, is_valid_name, NAME_CONSTRAINTS)
validate_student_id = _validator(FIELD_STUDENT_ID, is_valid_student_id, STUDENT_ID_CONSTRAINTS)
validate_major = _validator(FIELD_MAJOR, is_valid_major, MAJOR_CONSTRAINTS)
validate_year = _validator(FIELD_YEAR, is_valid_year, YEAR_CONSTRAINTS)
validate_group = _validator(FIELD_GROUP, is_valid_group, GROUP_CONSTRAINTS)


def validate_net_id(raw: str) -> FieldResult:
    """Validate a net id; on success the value is the full email address."""

    trimmed = raw.strip()
    if not is_valid_net_id(trimmed):
        return _fail(FIELD_EMAIL, NET_ID_CONSTRAINTS)
    return FieldResult(value=trimmed + EMAIL_DOMAIN)


def _optional(validate: Callable[[str], FieldResult]) -> Callable[[str], FieldResult]:
    def validate_optional(raw: str) -> FieldResult:
        if not raw.strip():
            return FieldResult(value=UNSET)
        return validate(raw)

    return validate_optional


# ------------------------------
# Constructors
# ------------------------------


def parse_name(raw: str) -> str:
    return validate_name(raw).unwrap()


def parse_student_id(raw: str) -> str:
    return validate_student_id(raw).unwrap()


def parse_net_id(raw: str) -> str:
    return validate_net_id(raw).unwrap()


def parse_major(raw: str) -> str:
    return validate_major(raw).unwrap()


def parse_year(raw: str) -> str:
    return validate_year(raw).unwrap()


def parse_optional_net_id(raw: str) -> str:
    return _optional(validate_net_id)(raw).unwrap()


def parse_optional_major(raw: str) -> str:
    return _optional(validate_major)(raw).unwrap()


def parse_optional_year(raw: str) -> str:
    return _optional(validate_year)(raw).unwrap()


def parse_optional_group(raw: str) -> str:
    return _optional(validate_group)(raw).unwrap()


def parse_comment(raw: str) -> str:
    """Comments accept any text; only surrounding whitespace is dropped."""

    return raw.strip()


__all__ = [
    "UNSET",
    "FieldResult",
    "NAME_CONSTRAINTS",
    "STUDENT_ID_CONSTRAINTS",
    "NET_ID_CONSTRAINTS",
    "MAJOR_CONSTRAINTS",
    "YEAR_CONSTRAINTS",
    "GROUP_CONSTRAINTS",
    "is_valid_name",
    "is_valid_student_id",
    "is_valid_net_id",
    "is_valid_email",
    "is_valid_major",
    "is_valid_year",
    "is_valid_group",
    "validate_name",
    "validate_student_id",
    "validate_net_id",
    "validate_major",
    "validate_year",
    "validate_group",
    "parse_name",
    "parse_student_id",
    "parse_net_id",
    "parse_major",
    "parse_year",
    "parse_optional_net_id",
    "parse_optional_major",
    "parse_optional_year",
    "parse_optional_group",
    "parse_comment",
]
