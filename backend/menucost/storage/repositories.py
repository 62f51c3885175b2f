from typing import Optional

from sqlmodel import Session, select

from menucost.logging import get_logger
from menucost.services.costing.exceptions import UnknownInventoryItemError
from menucost.services.costing.models import InventoryItem
from menucost.services.costing.units import parse_purchase_unit
from menucost.storage.models import InventoryItemRecord

logger = get_logger(__name__)


def create_inventory_item(
    session: Session, name: str, purchase_unit: str, package_size: float, package_price: float
) -> InventoryItemRecord:
    record = InventoryItemRecord(
        name=name,
        purchase_unit=parse_purchase_unit(purchase_unit).value,
        package_size=package_size,
        package_price=package_price,
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info(
        "inventory.created id=%s name=%s unit=%s price=%s size=%s",
        record.id, record.name, record.purchase_unit, record.package_price, record.package_size,
    )
    return record


def list_inventory_items(session: Session) -> list[InventoryItemRecord]:
    return list(session.exec(select(InventoryItemRecord).order_by(InventoryItemRecord.name)))


def get_inventory_item_by_id(session: Session, item_id: int) -> InventoryItemRecord | None:
    return session.get(InventoryItemRecord, item_id)


def require_inventory_item_by_id(session: Session, item_id: int) -> InventoryItemRecord:
    record = get_inventory_item_by_id(session, item_id)
    if record is None:
        raise UnknownInventoryItemError(item_id)
    return record


def get_inventory_item_by_name(session: Session, name: str) -> InventoryItemRecord | None:
    return session.exec(select(InventoryItemRecord).where(InventoryItemRecord.name == name)).first()


def update_inventory_item(session: Session, item_id: int, **changes) -> InventoryItemRecord | None:
    record = session.get(InventoryItemRecord, item_id)
    if record is None:
        return None
    if changes.get("purchase_unit") is not None:
        changes["purchase_unit"] = parse_purchase_unit(changes["purchase_unit"]).value
    for key, value in changes.items():
        if value is not None:
            setattr(record, key, value)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info("inventory.updated id=%s fields=%s", item_id, ",".join(sorted(changes)))
    return record


def delete_inventory_item(session: Session, item_id: int) -> None:
    """Delete an item. Recipe lines pointing at it become unresolved references."""
    record = require_inventory_item_by_id(session, item_id)
    session.delete(record)
    session.commit()
    logger.info("inventory.deleted id=%s", item_id)


class SqlInventory:
    """InventoryLookup backed by the inventory_item table."""

    def __init__(self, session: Session):
        self.session = session
        self._cache: dict[str, Optional[InventoryItem]] = {}

    def get_inventory_item(self, item_id: str) -> Optional[InventoryItem]:
        key = str(item_id)
        if key in self._cache:
            return self._cache[key]
        try:
            record = get_inventory_item_by_id(self.session, int(key))
        except ValueError:
            record = None
        item = record.to_item() if record else None
        self._cache[key] = item
        return item
