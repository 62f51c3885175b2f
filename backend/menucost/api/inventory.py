from fastapi import APIRouter, HTTPException

from menucost.config import settings
from menucost.logging import get_logger
from menucost.schemas.costing import InventoryItemCreate, InventoryItemRead, PriceBreakdownEntry
from menucost.services.costing import (
    PURCHASE_UNIT_LABELS,
    InvalidUnitError,
    UnknownInventoryItemError,
    compatible_units,
    format_price_per_unit,
    price_breakdown,
    require_inventory_item,
)
from menucost.storage import db
from menucost.storage.models import InventoryItemRecord
from menucost.storage.repositories import (
    SqlInventory,
    create_inventory_item,
    delete_inventory_item,
    get_inventory_item_by_name,
    list_inventory_items,
    require_inventory_item_by_id,
)

router = APIRouter()
logger = get_logger(__name__)


def _to_read(record: InventoryItemRecord) -> InventoryItemRead:
    item = record.to_item()
    return InventoryItemRead(
        id=record.id,
        name=item.name,
        purchase_unit=item.purchase_unit.value,
        purchase_unit_label=PURCHASE_UNIT_LABELS[item.purchase_unit],
        package_size=item.package_size,
        package_price=item.package_price,
        unit_price=item.unit_price,
        compatible_units=[u.value for u in compatible_units(item.purchase_unit)],
    )


def _not_found(e: UnknownInventoryItemError) -> HTTPException:
    logger.info("inventory.not_found id=%s", e.item_id)
    return HTTPException(status_code=404, detail=str(e))


@router.post("/inventory", response_model=InventoryItemRead, status_code=201)
def post_inventory_item(body: InventoryItemCreate) -> InventoryItemRead:
    with db.get_session() as session:
        if get_inventory_item_by_name(session, body.name):
            raise HTTPException(status_code=409, detail=f"Inventory item '{body.name}' already exists")
        try:
            record = create_inventory_item(
                session,
                name=body.name,
                purchase_unit=body.purchase_unit,
                package_size=body.package_size,
                package_price=body.package_price,
            )
        except InvalidUnitError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _to_read(record)


@router.get("/inventory", response_model=list[InventoryItemRead])
def get_inventory() -> list[InventoryItemRead]:
    with db.get_session() as session:
        return [_to_read(r) for r in list_inventory_items(session)]


@router.get("/inventory/{item_id}", response_model=InventoryItemRead)
def get_inventory_item(item_id: int) -> InventoryItemRead:
    with db.get_session() as session:
        try:
            return _to_read(require_inventory_item_by_id(session, item_id))
        except UnknownInventoryItemError as e:
            raise _not_found(e)


@router.delete("/inventory/{item_id}")
def remove_inventory_item(item_id: int) -> dict:
    with db.get_session() as session:
        try:
            delete_inventory_item(session, item_id)
        except UnknownInventoryItemError as e:
            raise _not_found(e)
    return {"deleted": item_id}


@router.get("/inventory/{item_id}/breakdown", response_model=list[PriceBreakdownEntry])
def get_price_breakdown(item_id: int) -> list[PriceBreakdownEntry]:
    """Price per compatible usage unit, for display next to the item."""
    with db.get_session() as session:
        try:
            item = require_inventory_item(SqlInventory(session), str(item_id))
        except UnknownInventoryItemError as e:
            raise _not_found(e)
    return [
        PriceBreakdownEntry(
            usage_unit=row.usage_unit.value,
            price_per_unit=row.price_per_unit,
            display=format_price_per_unit(
                item.unit_price, item.purchase_unit, row.usage_unit, settings.unit_price_decimals
            ),
        )
        for row in price_breakdown(item.unit_price, item.purchase_unit)
    ]
