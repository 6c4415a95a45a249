import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy import delete, insert, select, update

from ..errors import ConflictError
from ..models import menu_table, menu_item_table
from ..resolvers import resolve_menu
from ..schemas import MenuEnvelope
from ..storage import Row, Storage, get_storage
from ..utils.validators import require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menus", tags=["menus"])


def _fetch(storage: Storage, menu_id: int) -> Row:
    return storage.query_one(select(menu_table).where(menu_table.c.id == menu_id))

@router.get("")
def list_menus(storage: Storage = Depends(get_storage)):
    return {"menus": storage.query(select(menu_table))}

@router.post("", status_code=201)
def create_menu(body: MenuEnvelope, storage: Storage = Depends(get_storage)):
    values = require_fields("menu", body.menu)

    result = storage.execute(insert(menu_table).values(title=values["title"]))
    logger.info("Menu inserted with id %s", result.affected_row_id)
    return {"menu": _fetch(storage, result.affected_row_id)}

@router.get("/{menu_id}")
def get_menu(menu: Row = Depends(resolve_menu)):
    return {"menu": menu}

@router.put("/{menu_id}")
def update_menu(
    body: MenuEnvelope,
    menu: Row = Depends(resolve_menu),
    storage: Storage = Depends(get_storage),
):
    values = require_fields("menu", body.menu)

    storage.execute(update(menu_table).where(menu_table.c.id == menu["id"]).values(title=values["title"]))
    logger.info("Menu %s updated", menu["id"])
    return {"menu": _fetch(storage, menu["id"])}

# A menu that still owns items cannot be deleted
@router.delete("/{menu_id}", status_code=204)
def delete_menu(menu: Row = Depends(resolve_menu), storage: Storage = Depends(get_storage)):
    item = storage.query_one(
        select(menu_item_table.c.id).where(menu_item_table.c.menu_id == menu["id"]).limit(1)
    )
    if item is not None:
        raise ConflictError("menu has menu items")

    storage.execute(delete(menu_table).where(menu_table.c.id == menu["id"]))
    logger.info("Menu %s deleted", menu["id"])
    return Response(status_code=204)
