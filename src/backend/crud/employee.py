# src/backend/crud/employee.py
from __future__ import annotations

import logging
from typing import Optional, List

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.backend.models.employee import Employee
from src.backend.models.org.directory_info import DirectoryInfo
from src.backend.models.org.division_info import DivisionInfo
from src.backend.schemas.employee import EmployeeBase, EmployeeCreate, EmployeeUpdate
from src.backend.utils.errors import UnknownDivisionError
from src.backend.utils.timezone import now_naive

logger = logging.getLogger(__name__)


# -------------------------
# helpers
# -------------------------
def _s(v: Optional[str]) -> Optional[str]:
    """
    Normalize a string:
    - None -> None
    - "" / "   " -> None
    - else stripped string
    """
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _apply(row: Employee, data: EmployeeBase) -> None:
    """Copy every mutable field from the payload onto the row (full replacement)."""
    row.emp_type = data.emp_type
    row.id_no = data.id_no
    row.title = data.title
    row.name = data.name.strip()
    row.designation = data.designation

    row.directory = data.directory
    row.division = data.division

    row.date_of_join = data.date_of_join
    # absent stays NULL, never defaulted to today
    row.date_of_post = data.date_of_post

    row.qualification = _s(data.qualification)
    row.discipline = _s(data.discipline)
    row.sex = data.sex
    row.blood_group = _s(data.blood_group)
    row.phone = data.phone
    row.address = data.address
    row.permanent_address = data.permanent_address
    row.dob = data.dob


async def _commit(db: AsyncSession, row: Optional[Employee] = None) -> None:
    try:
        await db.commit()
        if row is not None:
            await db.refresh(row)
    except Exception:
        await db.rollback()
        raise


# -------------------------
# Listing
# -------------------------
async def list_employees(db: AsyncSession) -> List[Employee]:
    res = await db.execute(select(Employee).order_by(Employee.id))
    return list(res.scalars().all())


# -------------------------
# Dropdown helpers
# -------------------------
async def list_directories(db: AsyncSession) -> List[str]:
    res = await db.execute(
        select(DirectoryInfo.directory_id).order_by(
            DirectoryInfo.sort_order.nulls_last(), DirectoryInfo.directory_id
        )
    )
    return list(res.scalars().all())


async def list_divisions(db: AsyncSession, directory: Optional[str]) -> List[str]:
    directory = _s(directory)
    if not directory:
        return []
    res = await db.execute(
        select(DivisionInfo.division_name)
        .where(DivisionInfo.directory_id == directory)
        .order_by(DivisionInfo.sort_order.nulls_last(), DivisionInfo.division_name)
    )
    return list(res.scalars().all())


async def division_exists(db: AsyncSession, directory: str, division: str) -> bool:
    res = await db.execute(
        select(DivisionInfo.division_name).where(
            DivisionInfo.directory_id == directory,
            DivisionInfo.division_name == division,
        )
    )
    return res.scalar_one_or_none() is not None


async def _check_division(db: AsyncSession, data: EmployeeBase) -> None:
    if not await division_exists(db, data.directory, data.division):
        raise UnknownDivisionError(data.directory, data.division)


# -------------------------
# Single
# -------------------------
async def get_employee(db: AsyncSession, record_id: int) -> Optional[Employee]:
    res = await db.execute(select(Employee).where(Employee.id == record_id))
    return res.scalar_one_or_none()


# -------------------------
# Create / Update / Delete
# -------------------------
async def create_employee(db: AsyncSession, data: EmployeeCreate) -> Employee:
    await _check_division(db, data)

    now = now_naive()
    row = Employee(emp_id=data.emp_id, created_dt=now, updated_dt=now)
    _apply(row, data)

    db.add(row)
    await _commit(db, row)
    logger.info("Created employee id=%s emp_id=%s", row.id, row.emp_id)
    return row


async def update_employee(
    db: AsyncSession,
    record_id: int,
    data: EmployeeUpdate,
) -> Optional[Employee]:
    row = await get_employee(db, record_id)
    if not row:
        return None

    await _check_division(db, data)

    _apply(row, data)
    row.updated_dt = now_naive()

    await _commit(db, row)
    logger.info("Updated employee id=%s", record_id)
    return row


async def delete_employee(db: AsyncSession, record_id: int) -> bool:
    res = await db.execute(delete(Employee).where(Employee.id == record_id))
    await _commit(db)
    deleted = (res.rowcount or 0) > 0
    if deleted:
        logger.info("Deleted employee id=%s", record_id)
    return deleted
