"""
Ingredient costing: the cost of drawing a quantity, in a usage unit, from an
inventory item priced per purchase unit.
"""

from typing import Optional

from menucost.logging import get_logger
from menucost.services.costing.conversion import price_per_unit
from menucost.services.costing.exceptions import UnknownInventoryItemError
from menucost.services.costing.models import IngredientLine, InventoryItem, InventoryLookup, LineCost
from menucost.services.costing.units import PurchaseUnit, UsageUnit

logger = get_logger(__name__)


def ingredient_cost(
    quantity: float,
    usage_unit: UsageUnit | str,
    purchase_price: float,
    purchase_unit: PurchaseUnit | str,
    strict: bool = True,
) -> float:
    """
    quantity * price per usage unit, at full precision.

    purchase_price is the price of ONE purchase unit (package price / package size).
    """
    if quantity == 0:
        return 0.0
    return quantity * price_per_unit(purchase_price, purchase_unit, usage_unit, strict=strict)


def require_inventory_item(inventory: InventoryLookup, item_id: str) -> InventoryItem:
    """Lookup for callers that cannot proceed without the item."""
    item: Optional[InventoryItem] = inventory.get_inventory_item(item_id)
    if item is None:
        raise UnknownInventoryItemError(item_id)
    return item


def cost_line(line: IngredientLine, inventory: InventoryLookup, strict: bool = True) -> LineCost:
    """Cost a single line. An unresolvable inventory reference costs 0."""
    item = inventory.get_inventory_item(line.inventory_item_id)
    if item is None:
        logger.info("costing.unresolved inventory_item_id=%s", line.inventory_item_id)
        return LineCost(line=line, item=None, usage_unit=line.usage_unit, price_per_unit=0.0, cost=0.0)

    unit = line.resolve_unit(item)
    if line.quantity == 0:
        return LineCost(line=line, item=item, usage_unit=unit, price_per_unit=0.0, cost=0.0)

    unit_price = price_per_unit(item.unit_price, item.purchase_unit, unit, strict=strict)
    return LineCost(line=line, item=item, usage_unit=unit, price_per_unit=unit_price, cost=line.quantity * unit_price)
