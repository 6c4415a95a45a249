"""
Resource resolvers.

Each resolver is a FastAPI dependency that loads the row addressed by a path
identifier and hands it to the route handler as an argument. When the row
does not exist the request stops here with a 404 and no handler runs.

Nested resolvers also require the child to belong to the resolved parent:
a timesheet addressed under another employee, or a menu item addressed
under another menu, is reported as not found.
"""
from fastapi import Depends
from sqlalchemy import select

from .errors import NotFoundError
from .models import employee_table, timesheet_table, menu_table, menu_item_table
from .storage import Row, Storage, get_storage
from .utils.types import NOT_FOUND_MESSAGES, ResourceName

# Largest id a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


def _parse_id(raw: str, resource: ResourceName) -> int:
    # Ids that are not plain digits or do not fit the column can never match a row
    if not (raw.isascii() and raw.isdigit()) or int(raw) > MAX_ID:
        raise NotFoundError(NOT_FOUND_MESSAGES[resource])
    return int(raw)


def resolve_employee(employee_id: str, storage: Storage = Depends(get_storage)) -> Row:
    row_id = _parse_id(employee_id, "employee")
    employee = storage.query_one(select(employee_table).where(employee_table.c.id == row_id))
    if employee is None:
        raise NotFoundError(NOT_FOUND_MESSAGES["employee"])
    return employee


def resolve_timesheet(
    timesheet_id: str,
    employee: Row = Depends(resolve_employee),
    storage: Storage = Depends(get_storage),
) -> Row:
    row_id = _parse_id(timesheet_id, "timesheet")
    timesheet = storage.query_one(select(timesheet_table).where(timesheet_table.c.id == row_id))
    if timesheet is None or timesheet["employee_id"] != employee["id"]:
        raise NotFoundError(NOT_FOUND_MESSAGES["timesheet"])
    return timesheet


def resolve_menu(menu_id: str, storage: Storage = Depends(get_storage)) -> Row:
    row_id = _parse_id(menu_id, "menu")
    menu = storage.query_one(select(menu_table).where(menu_table.c.id == row_id))
    if menu is None:
        raise NotFoundError(NOT_FOUND_MESSAGES["menu"])
    return menu


def resolve_menu_item(
    menu_item_id: str,
    menu: Row = Depends(resolve_menu),
    storage: Storage = Depends(get_storage),
) -> Row:
    row_id = _parse_id(menu_item_id, "menuItem")
    menu_item = storage.query_one(select(menu_item_table).where(menu_item_table.c.id == row_id))
    if menu_item is None or menu_item["menu_id"] != menu["id"]:
        raise NotFoundError(NOT_FOUND_MESSAGES["menuItem"])
    return menu_item
