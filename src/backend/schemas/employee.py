# src/backend/schemas/employee.py
from __future__ import annotations

import re
from datetime import date
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.backend.models.employee import (
    BLOOD_GROUP_VALUES,
    DESIGNATION_VALUES,
    DISCIPLINE_VALUES,
    EMP_TYPE_VALUES,
    SEX_VALUES,
    TITLE_VALUES,
)

_DIGITS = re.compile(r"[0-9]+")
_PHONE = re.compile(r"[0-9]{10}")


def _one_of(v: str, values: tuple, label: str) -> str:
    v = (v or "").strip()
    if v not in values:
        raise ValueError(f"{label} must be one of {values}")
    return v


class _CamelModel(BaseModel):
    # JSON uses camelCase keys, the table uses snake_case columns
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeBase(_CamelModel):
    """Every mutable field of an employee record, as accepted on create and update."""

    emp_type: str = Field(alias="type")
    id_no: str
    title: str
    name: str
    designation: str
    directory: str
    division: str
    date_of_join: date
    date_of_post: Optional[date] = None
    qualification: Optional[str] = None
    discipline: Optional[str] = None
    sex: str = Field(validation_alias=AliasChoices("sex", "gender"), serialization_alias="sex")
    blood_group: Optional[str] = None
    phone: str
    address: str
    permanent_address: str
    dob: date

    @field_validator("date_of_post", "qualification", "discipline", "blood_group", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        # forms send "" for untouched optional inputs
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("name", "directory", "division", "address", "permanent_address")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("id_no")
    @classmethod
    def id_no_digits(cls, v: str) -> str:
        v = (v or "").strip()
        if not _DIGITS.fullmatch(v):
            raise ValueError("idNo must contain digits only")
        return v

    @field_validator("phone")
    @classmethod
    def phone_ten_digits(cls, v: str) -> str:
        v = (v or "").strip()
        if not _PHONE.fullmatch(v):
            raise ValueError("phone must be exactly 10 digits")
        return v

    @field_validator("emp_type")
    @classmethod
    def validate_emp_type(cls, v: str) -> str:
        return _one_of(v, EMP_TYPE_VALUES, "type")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _one_of(v, TITLE_VALUES, "title")

    @field_validator("designation")
    @classmethod
    def validate_designation(cls, v: str) -> str:
        return _one_of(v, DESIGNATION_VALUES, "designation")

    @field_validator("sex")
    @classmethod
    def validate_sex(cls, v: str) -> str:
        return _one_of(v, SEX_VALUES, "sex")

    @field_validator("discipline")
    @classmethod
    def validate_discipline(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _one_of(v, DISCIPLINE_VALUES, "discipline")

    @field_validator("blood_group")
    @classmethod
    def validate_blood_group(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _one_of(v, BLOOD_GROUP_VALUES, "bloodGroup")

    @model_validator(mode="after")
    def post_not_before_join(self):
        if self.date_of_post is not None and self.date_of_post < self.date_of_join:
            raise ValueError("dateOfPost must not be before dateOfJoin")
        return self


class EmployeeCreate(EmployeeBase):
    emp_id: str

    @field_validator("emp_id")
    @classmethod
    def emp_id_digits(cls, v: str) -> str:
        v = (v or "").strip()
        if not _DIGITS.fullmatch(v):
            raise ValueError("empId must contain digits only")
        return v


class EmployeeUpdate(EmployeeBase):
    # empId is fixed at creation; a stray "empId" key in the body is ignored
    pass


class EmployeeOut(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    emp_id: str
    emp_type: str = Field(alias="type")
    id_no: str
    title: str
    name: str
    designation: str
    directory: str
    division: str
    date_of_join: date
    date_of_post: Optional[date] = None
    qualification: Optional[str] = None
    discipline: Optional[str] = None
    sex: str
    blood_group: Optional[str] = None
    phone: str
    address: str
    permanent_address: str
    dob: date


class MessageOut(BaseModel):
    message: str
    id: int
