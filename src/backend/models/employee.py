# src/backend/models/employee.py
from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKeyConstraint,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.backend.utils.database import Base
from src.backend.utils.timezone import now_naive

# Keep values in sync with the console field descriptors
EMP_TYPE_VALUES = ("Staff", "Contract")
TITLE_VALUES = ("Mr.", "Ms.", "Mrs.", "Dr.")
DESIGNATION_VALUES = ("Software Engineer", "Director", "Group Director", "Intern")
DISCIPLINE_VALUES = ("Computer Science", "Statistics")
SEX_VALUES = ("Male", "Female", "Other")
BLOOD_GROUP_VALUES = ("A+", "A-", "B+", "B-", "O+", "O-", "AB+", "AB-")


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        ForeignKeyConstraint(
            ["directory", "division"],
            ["division_info.directory_id", "division_info.division_name"],
            name="fk_employees_division",
            ondelete="RESTRICT",
        ),
        CheckConstraint(
            "date_of_post IS NULL OR date_of_post >= date_of_join",
            name="ck_employees_post_after_join",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    emp_id: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    id_no: Mapped[str] = mapped_column(String(20), nullable=False)
    emp_type: Mapped[str] = mapped_column(Enum(*EMP_TYPE_VALUES, name="emp_type"), nullable=False)
    title: Mapped[str] = mapped_column(String(5), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    designation: Mapped[str] = mapped_column(String(50), nullable=False)

    directory: Mapped[str] = mapped_column(String(20), nullable=False)
    division: Mapped[str] = mapped_column(String(100), nullable=False)

    date_of_join: Mapped[date] = mapped_column(Date, nullable=False)
    date_of_post: Mapped[date | None] = mapped_column(Date, nullable=True)

    qualification: Mapped[str | None] = mapped_column(String(100), nullable=True)
    discipline: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sex: Mapped[str] = mapped_column(String(10), nullable=False)
    blood_group: Mapped[str | None] = mapped_column(String(5), nullable=True)
    phone: Mapped[str] = mapped_column(String(10), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    permanent_address: Mapped[str] = mapped_column(Text, nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)

    created_dt: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=now_naive)
    updated_dt: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=now_naive)

    def __repr__(self) -> str:
        return f"<Employee {self.id} {self.emp_id} {self.name}>"
