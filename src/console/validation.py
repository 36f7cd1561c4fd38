# src/console/validation.py
from __future__ import annotations

import re
from datetime import date
from typing import Callable, List, Mapping, Optional, Tuple

from src.console.fields import FIELDS_BY_KEY, REQUIRED_KEYS

_NON_DIGIT = re.compile(r"\D")

EMP_ID_DIGITS = 8
ID_NO_DIGITS = 4
PHONE_DIGITS = 10


def _exact_digits(n: int) -> Callable[[str], bool]:
    pattern = re.compile(rf"[0-9]{{{n}}}")
    return lambda v: bool(pattern.fullmatch(v or ""))


is_valid_phone = _exact_digits(PHONE_DIGITS)
is_valid_emp_id = _exact_digits(EMP_ID_DIGITS)
is_valid_id_no = _exact_digits(ID_NO_DIGITS)


def sanitize_input(key: str, value: str, previous: str = "") -> str:
    """
    Clean a keystroke-level edit the way the form inputs do.

    Digit-only fields drop every non-digit; an edit that would exceed the
    field's maximum length is refused and ``previous`` is kept.
    """
    spec = FIELDS_BY_KEY.get(key)
    if spec is None or spec.max_digits is None:
        return value
    digits = _NON_DIGIT.sub("", value or "")
    if len(digits) > spec.max_digits:
        return previous
    return digits


def _parse_iso(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


Rule = Tuple[Callable[[Mapping[str, str]], bool], str]

_STRICT_RULES: List[Rule] = [
    (lambda f: is_valid_emp_id(f.get("empId", "")), "Employee ID must be exactly 8 digits"),
    (lambda f: is_valid_id_no(f.get("idNo", "")), "ID Number must be exactly 4 digits"),
    (lambda f: is_valid_phone(f.get("phone", "")), "Phone must be 10 digits"),
    (lambda f: bool(f.get("name", "").strip()), "Full Name is required"),
]

_BASIC_RULES: List[Rule] = [
    (lambda f: bool(f.get("name", "").strip()), "Full Name is required"),
    (lambda f: bool(f.get("empId", "").strip()), "Employee ID is required"),
    (lambda f: is_valid_phone(f.get("phone", "")), "Enter a valid 10-digit phone number"),
]

_DATE_RULES: List[Rule] = [
    (lambda f: bool(f.get("dateOfJoin")) and bool(f.get("dob")), "Please fill date fields properly"),
    (lambda f: _post_not_before_join(f), "Date of Present Post cannot be before Date of Joining"),
]


def _post_not_before_join(form: Mapping[str, str]) -> bool:
    post = form.get("dateOfPost")
    if not post:
        return True
    joined = _parse_iso(form.get("dateOfJoin", ""))
    posted = _parse_iso(post)
    if joined is None or posted is None:
        return False
    return posted >= joined


def validate_form(form: Mapping[str, str], strict: bool = True) -> Optional[str]:
    """Return the message of the first failing rule, or None when the form may be submitted."""
    rules = (_STRICT_RULES if strict else _BASIC_RULES) + _DATE_RULES
    for check, message in rules:
        if not check(form):
            return message
    return None


def missing_required(form: Mapping[str, str]) -> List[str]:
    """Every required key whose value is blank, in form order."""
    return [k for k in REQUIRED_KEYS if not str(form.get(k, "")).strip()]
