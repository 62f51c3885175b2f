import pytest

from menucost.services.costing import (
    IngredientLine,
    InvalidUnitError,
    PurchaseUnit,
    UnknownInventoryItemError,
    recipe_cost,
)
from menucost.storage.repositories import (
    SqlInventory,
    create_inventory_item,
    delete_inventory_item,
    get_inventory_item_by_id,
    list_inventory_items,
    require_inventory_item_by_id,
    update_inventory_item,
)


def test_create_and_list(session):
    create_inventory_item(session, "Whole Milk", "gallon", 1, 3.84)
    create_inventory_item(session, "Espresso Beans", "pounds", 3, 45.0)
    names = [r.name for r in list_inventory_items(session)]
    assert names == ["Espresso Beans", "Whole Milk"]
    beans = list_inventory_items(session)[0]
    assert beans.purchase_unit == "lb"
    assert beans.to_item().unit_price == pytest.approx(15.0)


def test_create_rejects_unknown_unit(session):
    with pytest.raises(InvalidUnitError):
        create_inventory_item(session, "Mystery", "barrel", 1, 1.0)


def test_update_inventory_item(session):
    record = create_inventory_item(session, "Vanilla Syrup", "oz", 25.4, 12.70)
    updated = update_inventory_item(session, record.id, package_price=15.24, purchase_unit="ounces")
    assert updated.package_price == 15.24
    assert updated.to_item().purchase_unit == PurchaseUnit.OZ
    assert update_inventory_item(session, 9999, package_price=1.0) is None


def test_sql_inventory_lookup(session):
    milk = create_inventory_item(session, "Whole Milk", "gallon", 1, 3.84)
    inventory = SqlInventory(session)
    item = inventory.get_inventory_item(str(milk.id))
    assert item.name == "Whole Milk"
    assert inventory.get_inventory_item("not-a-number") is None
    assert inventory.get_inventory_item("424242") is None


def test_deleted_item_becomes_unresolved(session):
    milk = create_inventory_item(session, "Whole Milk", "gallon", 1, 3.84)
    beans = create_inventory_item(session, "Espresso Beans", "lb", 3, 45.0)
    lines = [IngredientLine(str(milk.id), 10, "oz"), IngredientLine(str(beans.id), 2, "oz")]

    delete_inventory_item(session, milk.id)
    assert get_inventory_item_by_id(session, milk.id) is None
    with pytest.raises(UnknownInventoryItemError):
        delete_inventory_item(session, milk.id)
    assert recipe_cost(lines, SqlInventory(session)) == pytest.approx(1.875)


def test_require_inventory_item_by_id(session):
    milk = create_inventory_item(session, "Whole Milk", "gallon", 1, 3.84)
    assert require_inventory_item_by_id(session, milk.id).name == "Whole Milk"
    with pytest.raises(UnknownInventoryItemError) as exc:
        require_inventory_item_by_id(session, 4242)
    assert exc.value.item_id == 4242


def test_created_at_is_timezone_aware():
    from menucost.storage.models import InventoryItemRecord

    record = InventoryItemRecord(name="Oat Milk", purchase_unit="gallon")
    assert record.created_at.tzinfo is not None
