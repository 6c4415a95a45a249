import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy import delete, insert, select, update

from ..models import menu_item_table
from ..resolvers import resolve_menu, resolve_menu_item
from ..schemas import MenuItemEnvelope
from ..storage import Row, Storage, get_storage
from ..utils.validators import require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menus/{menu_id}/menu-items", tags=["menu-items"])


def _fetch(storage: Storage, menu_item_id: int) -> Row:
    return storage.query_one(select(menu_item_table).where(menu_item_table.c.id == menu_item_id))

@router.get("")
def list_menu_items(menu: Row = Depends(resolve_menu), storage: Storage = Depends(get_storage)):
    rows = storage.query(select(menu_item_table).where(menu_item_table.c.menu_id == menu["id"]))
    return {"menuItems": rows}

# description is optional, the other fields are required
@router.post("", status_code=201)
def create_menu_item(
    body: MenuItemEnvelope,
    menu: Row = Depends(resolve_menu),
    storage: Storage = Depends(get_storage),
):
    values = require_fields("menuItem", body.menu_item)

    result = storage.execute(
        insert(menu_item_table).values(
            name=values["name"],
            description=values["description"],
            inventory=values["inventory"],
            price=values["price"],
            menu_id=menu["id"],
        )
    )
    logger.info("Menu item inserted with id %s in menu %s", result.affected_row_id, menu["id"])
    return {"menuItem": _fetch(storage, result.affected_row_id)}

@router.put("/{menu_item_id}")
def update_menu_item(
    body: MenuItemEnvelope,
    menu_item: Row = Depends(resolve_menu_item),
    storage: Storage = Depends(get_storage),
):
    values = require_fields("menuItem", body.menu_item)

    storage.execute(
        update(menu_item_table)
        .where(menu_item_table.c.id == menu_item["id"])
        .values(
            name=values["name"],
            description=values["description"],
            inventory=values["inventory"],
            price=values["price"],
        )
    )
    logger.info("Menu item %s updated", menu_item["id"])
    return {"menuItem": _fetch(storage, menu_item["id"])}

@router.delete("/{menu_item_id}", status_code=204)
def delete_menu_item(menu_item: Row = Depends(resolve_menu_item), storage: Storage = Depends(get_storage)):
    storage.execute(delete(menu_item_table).where(menu_item_table.c.id == menu_item["id"]))
    logger.info("Menu item %s deleted", menu_item["id"])
    return Response(status_code=204)
