# src/console/fields.py
"""
Field descriptor table for the employee form and record table.

Everything that renders employees (form prompts, list table, PDF and
spreadsheet exports) walks ``FIELDS`` instead of hard-coding columns.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class FieldKind(str, Enum):
    TEXT = "text"
    TEL = "tel"
    SELECT = "select"
    DATE = "date"


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: Tuple[str, ...] = ()
    # options come from the store (directories / divisions)
    dynamic: bool = False
    # digits-only inputs and their maximum length
    max_digits: Optional[int] = None


EMP_TYPES = ("Staff", "Contract")
TITLES = ("Mr.", "Ms.", "Mrs.", "Dr.")
DESIGNATIONS = ("Software Engineer", "Director", "Group Director", "Intern")
DISCIPLINES = ("Computer Science", "Statistics")
SEXES = ("Male", "Female", "Other")
BLOOD_GROUPS = ("A+", "A-", "B+", "B-", "O+", "O-", "AB+", "AB-")

FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("empId", "Employee ID", required=True, max_digits=8),
    FieldSpec("type", "Type", FieldKind.SELECT, required=True, options=EMP_TYPES),
    FieldSpec("idNo", "ID Number", required=True, max_digits=4),
    FieldSpec("title", "Title", FieldKind.SELECT, required=True, options=TITLES),
    FieldSpec("name", "Full Name", required=True),
    FieldSpec("designation", "Designation", FieldKind.SELECT, required=True, options=DESIGNATIONS),
    FieldSpec("directory", "Directory", FieldKind.SELECT, required=True, dynamic=True),
    FieldSpec("division", "Division", FieldKind.SELECT, required=True, dynamic=True),
    FieldSpec("dateOfJoin", "Date of Joining", FieldKind.DATE, required=True),
    FieldSpec("dateOfPost", "Date of Present Post", FieldKind.DATE),
    FieldSpec("qualification", "Qualification"),
    FieldSpec("discipline", "Discipline", FieldKind.SELECT, options=DISCIPLINES),
    FieldSpec("sex", "Sex", FieldKind.SELECT, required=True, options=SEXES),
    FieldSpec("bloodGroup", "Blood Group", FieldKind.SELECT, options=BLOOD_GROUPS),
    FieldSpec("phone", "Phone (10 digits)", FieldKind.TEL, required=True, max_digits=10),
    FieldSpec("address", "Address (Current)", required=True),
    FieldSpec("permanentAddress", "Permanent Address", required=True),
    FieldSpec("dob", "Date of Birth", FieldKind.DATE, required=True),
)

FIELDS_BY_KEY: Dict[str, FieldSpec] = {f.key: f for f in FIELDS}
REQUIRED_KEYS: Tuple[str, ...] = tuple(f.key for f in FIELDS if f.required)


def empty_form() -> Dict[str, str]:
    return {f.key: "" for f in FIELDS}


def form_from_record(record: Dict[str, object]) -> Dict[str, str]:
    """Project a store record onto the form keys; None becomes ""."""
    form = empty_form()
    for key in form:
        value = record.get(key)
        if value is None and key == "sex":
            # older stores send "gender"
            value = record.get("gender")
        form[key] = "" if value is None else str(value)
    return form


def options_for(spec: FieldSpec, directories: Tuple[str, ...], divisions: Tuple[str, ...]) -> Tuple[str, ...]:
    if spec.key == "directory":
        return directories
    if spec.key == "division":
        return divisions
    return spec.options
