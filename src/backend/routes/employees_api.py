# src/backend/routes/employees_api.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.backend.crud.employee import (
    list_employees,
    get_employee,
    create_employee,
    update_employee,
    delete_employee,
    list_directories,
    list_divisions,
)
from src.backend.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, MessageOut
from src.backend.utils.database import get_db
from src.backend.utils.errors import UnknownDivisionError

router = APIRouter(prefix="/api/employees", tags=["Employees"])

DUPLICATE_MESSAGE = "Employee ID already exists or invalid data"


# ----------------------------------------------------------
# Dropdown options (declared before /{record_id})
# ----------------------------------------------------------
@router.get("/directories", response_model=List[str])
async def api_list_directories(db: AsyncSession = Depends(get_db)):
    return await list_directories(db)


@router.get("/divisions/{directory}", response_model=List[str])
async def api_list_divisions(directory: str, db: AsyncSession = Depends(get_db)):
    return await list_divisions(db, directory)


# ----------------------------------------------------------
# CRUD
# ----------------------------------------------------------
@router.get("", response_model=List[EmployeeOut])
async def api_list_employees(db: AsyncSession = Depends(get_db)):
    return await list_employees(db)


@router.get("/{record_id}", response_model=EmployeeOut)
async def api_get_employee(record_id: int, db: AsyncSession = Depends(get_db)):
    row = await get_employee(db, record_id)
    if not row:
        raise HTTPException(status_code=404, detail="Employee not found")
    return row


async def _create(payload: EmployeeCreate, db: AsyncSession):
    try:
        return await create_employee(db, payload)
    except UnknownDivisionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except IntegrityError:
        raise HTTPException(status_code=409, detail=DUPLICATE_MESSAGE)


@router.post("", response_model=EmployeeOut, status_code=201)
async def api_create_employee(payload: EmployeeCreate, db: AsyncSession = Depends(get_db)):
    return await _create(payload, db)


# older consoles post to /add
@router.post("/add", response_model=EmployeeOut, status_code=201)
async def api_add_employee(payload: EmployeeCreate, db: AsyncSession = Depends(get_db)):
    return await _create(payload, db)


@router.put("/{record_id}", response_model=MessageOut)
async def api_update_employee(
    record_id: int,
    payload: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        row = await update_employee(db, record_id, payload)
    except UnknownDivisionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except IntegrityError:
        raise HTTPException(status_code=409, detail=DUPLICATE_MESSAGE)
    if not row:
        raise HTTPException(status_code=404, detail="Employee not found")
    return {"message": "updated", "id": record_id}


@router.delete("/{record_id}", response_model=MessageOut)
async def api_delete_employee(record_id: int, db: AsyncSession = Depends(get_db)):
    if not await delete_employee(db, record_id):
        raise HTTPException(status_code=404, detail="Employee not found")
    return {"message": "deleted", "id": record_id}
