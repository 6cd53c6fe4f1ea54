"""
Request-body validation for the user-profile endpoints.

Each field owns an ordered chain of ``Rule`` (predicate + message)
pairs.  Every rule of every checked field is evaluated, and all failures
are collected in field order before the caller decides anything, so a
single response can report every problem with the body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from email_validator import EmailNotValidError, validate_email

from utils.schemas import FieldError

MIN_AGE = 0
MAX_AGE = 125
ROLES = ("admin", "user")

_INT_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class Rule:
    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldChain:
    name: str
    rules: Tuple[Rule, ...]
    # Update requests treat an explicit ``null`` as "not supplied" for these.
    nullable: bool = False
    normalize: Optional[Callable[[Any], Any]] = None


@dataclass
class Valid:
    record: Dict[str, Any]


@dataclass
class Invalid:
    errors: List[FieldError] = field(default_factory=list)


ValidationResult = Union[Valid, Invalid]


# ── Predicates ─────────────────────────────────────────────────────────


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_not_empty(value: Any) -> bool:
    return value is not None and str(value) != ""


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _to_int(value: Any) -> Optional[int]:
    """Integer value of ``value`` if it is written as a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value.strip())
    return None


def _is_age(value: Any) -> bool:
    age = _to_int(value)
    return age is not None and MIN_AGE <= age <= MAX_AGE


def _is_role(value: Any) -> bool:
    return isinstance(value, str) and value in ROLES


USER_FIELDS: Tuple[FieldChain, ...] = (
    FieldChain(
        "name",
        (
            Rule(_is_string, "Invalid value"),
            Rule(_is_not_empty, "Name is required"),
        ),
    ),
    FieldChain(
        "email",
        (
            Rule(_is_not_empty, "Email is required"),
            Rule(_is_email, "Valid email format is required"),
        ),
    ),
    FieldChain(
        "age",
        (Rule(_is_age, "Age must be between 0 and 125"),),
        nullable=True,
        normalize=_to_int,
    ),
    FieldChain("role", (Rule(_is_role, "Role must be admin or user"),)),
)


# ── Pipeline ───────────────────────────────────────────────────────────


def _run(
    body: Mapping[str, Any],
    chains: Tuple[FieldChain, ...],
    partial: bool,
) -> ValidationResult:
    errors: List[FieldError] = []
    record: Dict[str, Any] = {}

    for chain in chains:
        if partial:
            if chain.name not in body:
                continue
            if chain.nullable and body[chain.name] is None:
                continue
        value = body.get(chain.name)
        failed = False
        for rule in chain.rules:
            if not rule.check(value):
                errors.append(FieldError(msg=rule.message, param=chain.name))
                failed = True
        if not failed:
            record[chain.name] = chain.normalize(value) if chain.normalize else value

    if errors:
        return Invalid(errors)
    return Valid(record)


def validate_user_create(body: Mapping[str, Any]) -> ValidationResult:
    """All four fields are required."""
    return _run(body, USER_FIELDS, partial=False)


def validate_user_update(body: Mapping[str, Any]) -> ValidationResult:
    """
    Only supplied fields are checked; a supplied-but-empty value still
    fails.  ``age: null`` counts as not supplied.
    """
    return _run(body, USER_FIELDS, partial=True)
