import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy import delete, insert, select, update

from ..models import timesheet_table
from ..resolvers import resolve_employee, resolve_timesheet
from ..schemas import TimesheetEnvelope
from ..storage import Row, Storage, get_storage
from ..utils.validators import require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees/{employee_id}/timesheets", tags=["timesheets"])


def _fetch(storage: Storage, timesheet_id: int) -> Row:
    return storage.query_one(select(timesheet_table).where(timesheet_table.c.id == timesheet_id))

@router.get("")
def list_timesheets(employee: Row = Depends(resolve_employee), storage: Storage = Depends(get_storage)):
    rows = storage.query(select(timesheet_table).where(timesheet_table.c.employee_id == employee["id"]))
    return {"timesheets": rows}

@router.post("", status_code=201)
def create_timesheet(
    body: TimesheetEnvelope,
    employee: Row = Depends(resolve_employee),
    storage: Storage = Depends(get_storage),
):
    values = require_fields("timesheet", body.timesheet)

    result = storage.execute(
        insert(timesheet_table).values(
            employee_id=employee["id"],
            hours=values["hours"],
            rate=values["rate"],
            date=values["date"],
        )
    )
    logger.info("Timesheet inserted with id %s for employee %s", result.affected_row_id, employee["id"])
    # Read back by generated id, several timesheets may share a date
    return {"timesheet": _fetch(storage, result.affected_row_id)}

@router.put("/{timesheet_id}")
def update_timesheet(
    body: TimesheetEnvelope,
    timesheet: Row = Depends(resolve_timesheet),
    storage: Storage = Depends(get_storage),
):
    values = require_fields("timesheet", body.timesheet)

    storage.execute(
        update(timesheet_table)
        .where(timesheet_table.c.id == timesheet["id"])
        .values(hours=values["hours"], rate=values["rate"], date=values["date"])
    )
    logger.info("Timesheet %s updated", timesheet["id"])
    return {"timesheet": _fetch(storage, timesheet["id"])}

@router.delete("/{timesheet_id}", status_code=204)
def delete_timesheet(timesheet: Row = Depends(resolve_timesheet), storage: Storage = Depends(get_storage)):
    storage.execute(delete(timesheet_table).where(timesheet_table.c.id == timesheet["id"]))
    logger.info("Timesheet %s deleted", timesheet["id"])
    return Response(status_code=204)
