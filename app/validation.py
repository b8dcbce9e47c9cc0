from __future__ import annotations

import math
import re
from typing import Any, Optional

from app.errors import InvalidAge, InvalidEmailFormat, InvalidId, MissingField
from app.models import NewUser

MIN_AGE = 0
MAX_AGE = 120

# Marks an age the request body did not contain at all.
UNSET: Any = object()

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Leading-integer parse: "12abc" -> 12, "  7" -> 7, "-5" -> -5.
_LENIENT_ID_RE = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_ID_RE = re.compile(r"([0-9]+)")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(email or ""))


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _require_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MissingField()
    return value


def _require_email(value: Any) -> str:
    if isinstance(value, str):
        return _require_text(value)
    # null, false and 0 count as missing; any other non-string is a bad address.
    if not value:
        raise MissingField()
    raise InvalidEmailFormat()


def _coerce_age(age: Any) -> Optional[int]:
    if age is UNSET:
        return None
    # Supplied but null is not an age.
    if age is None:
        raise InvalidAge()
    # bool is an int subclass; JSON true/false is never an age.
    if isinstance(age, bool):
        raise InvalidAge()
    if isinstance(age, float):
        if not math.isfinite(age) or not age.is_integer():
            raise InvalidAge()
        age = int(age)
    if not isinstance(age, int):
        raise InvalidAge()
    if age < MIN_AGE or age > MAX_AGE:
        raise InvalidAge()
    return age


def validate_new_user(*, name: Any, email: Any, age: Any = UNSET) -> NewUser:
    """Turn loosely-typed request fields into a normalized :class:`NewUser`.

    Checks run in a fixed order: required fields, e-mail format (on the value
    exactly as supplied), then age. Leave `age` as UNSET when the client did not
    send it; an explicit None is rejected. Uniqueness is the registry's job since
    it needs the current records.
    """
    raw_name = _require_text(name)
    raw_email = _require_email(email)

    if not is_valid_email(raw_email):
        raise InvalidEmailFormat()

    return NewUser(
        name=raw_name.strip(),
        email=normalize_email(raw_email),
        age=_coerce_age(age),
    )


def parse_user_id(raw_id: Any, *, strict: bool = False) -> int:
    text = "" if raw_id is None else str(raw_id)
    if strict:
        m = _STRICT_ID_RE.fullmatch(text)
    else:
        m = _LENIENT_ID_RE.match(text)
    if m is None:
        raise InvalidId()

    user_id = int(m.group(1))
    if user_id <= 0:
        raise InvalidId()
    return user_id
