import logging

from fastapi import APIRouter, Depends
from sqlalchemy import insert, select, update

from ..models import employee_table
from ..resolvers import resolve_employee
from ..schemas import EmployeeEnvelope
from ..storage import Row, Storage, get_storage
from ..utils.validators import require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _fetch(storage: Storage, employee_id: int) -> Row:
    return storage.query_one(select(employee_table).where(employee_table.c.id == employee_id))

# Active employees only
@router.get("")
def list_employees(storage: Storage = Depends(get_storage)):
    rows = storage.query(
        select(employee_table).where(employee_table.c.is_current_employee.is_(True))
    )
    return {"employees": rows}

@router.post("", status_code=201)
def create_employee(body: EmployeeEnvelope, storage: Storage = Depends(get_storage)):
    values = require_fields("employee", body.employee)

    result = storage.execute(
        insert(employee_table).values(
            name=values["name"],
            position=values["position"],
            wage=values["wage"],
            is_current_employee=True,
        )
    )
    logger.info("Employee inserted with id %s", result.affected_row_id)
    return {"employee": _fetch(storage, result.affected_row_id)}

@router.get("/{employee_id}")
def get_employee(employee: Row = Depends(resolve_employee)):
    return {"employee": employee}

@router.put("/{employee_id}")
def update_employee(
    body: EmployeeEnvelope,
    employee: Row = Depends(resolve_employee),
    storage: Storage = Depends(get_storage),
):
    values = require_fields("employee", body.employee)

    storage.execute(
        update(employee_table)
        .where(employee_table.c.id == employee["id"])
        .values(name=values["name"], position=values["position"], wage=values["wage"])
    )
    logger.info("Employee %s updated", employee["id"])
    return {"employee": _fetch(storage, employee["id"])}

# Soft delete: the row stays, flagged as no longer current
@router.delete("/{employee_id}")
def delete_employee(employee: Row = Depends(resolve_employee), storage: Storage = Depends(get_storage)):
    storage.execute(
        update(employee_table)
        .where(employee_table.c.id == employee["id"])
        .values(is_current_employee=False)
    )
    logger.info("Employee %s marked as no longer current", employee["id"])
    return {"employee": _fetch(storage, employee["id"])}
