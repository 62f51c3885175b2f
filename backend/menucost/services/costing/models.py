"""Value types consumed and produced by the costing core."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Protocol

from menucost.services.costing.conversion import ensure_compatible
from menucost.services.costing.units import (
    PurchaseUnit,
    UsageUnit,
    default_usage_unit,
    parse_purchase_unit,
    parse_usage_unit,
)


class ModifierKind(str, Enum):
    ADD = "add"
    REPLACE = "replace"
    SIZE = "size"


class ModifierAction(str, Enum):
    ADD = "add"
    REPLACE = "replace"
    MULTIPLY = "multiply"


class FoodCostBand(str, Enum):
    HEALTHY = "healthy"
    BORDERLINE = "borderline"
    HIGH = "high"


@dataclass(frozen=True)
class InventoryItem:
    id: str
    name: str
    purchase_unit: PurchaseUnit
    package_size: float = 1.0
    package_price: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "purchase_unit", parse_purchase_unit(self.purchase_unit))

    @property
    def unit_price(self) -> float:
        """Price of one purchase unit."""
        if not self.package_size:
            return 0.0
        return self.package_price / self.package_size


@dataclass(frozen=True)
class IngredientLine:
    inventory_item_id: str
    quantity: float
    usage_unit: Optional[UsageUnit] = None  # None: the item's default usage unit

    def __post_init__(self) -> None:
        if self.usage_unit is not None:
            object.__setattr__(self, "usage_unit", parse_usage_unit(self.usage_unit))

    def resolve_unit(self, item: InventoryItem) -> UsageUnit:
        return self.usage_unit or default_usage_unit(item.purchase_unit)

    def validate_against(self, item: InventoryItem) -> None:
        """Raise IncompatibleUnitError if this line's unit can't be drawn from `item`."""
        ensure_compatible(item.purchase_unit, self.resolve_unit(item))


@dataclass(frozen=True)
class ModifierIngredientAction:
    action: ModifierAction
    quantity: float
    inventory_item_id: Optional[str] = None
    usage_unit: Optional[UsageUnit] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "action", ModifierAction(self.action))
        if self.usage_unit is not None:
            object.__setattr__(self, "usage_unit", parse_usage_unit(self.usage_unit))

    def as_line(self) -> Optional[IngredientLine]:
        """add/replace actions behave like a normal ingredient line; multiply has none."""
        if self.action == ModifierAction.MULTIPLY or self.inventory_item_id is None:
            return None
        return IngredientLine(
            inventory_item_id=self.inventory_item_id,
            quantity=self.quantity,
            usage_unit=self.usage_unit,
        )


@dataclass(frozen=True)
class Modifier:
    name: str
    kind: ModifierKind
    price_adjustment: float = 0.0
    actions: tuple[ModifierIngredientAction, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ModifierKind(self.kind))
        object.__setattr__(self, "actions", tuple(self.actions))


@dataclass(frozen=True)
class Recipe:
    id: str
    name: str
    retail_price: float
    ingredients: tuple[IngredientLine, ...] = ()
    modifiers: tuple[Modifier, ...] = ()
    category: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "modifiers", tuple(self.modifiers))


@dataclass(frozen=True)
class LineCost:
    line: IngredientLine
    item: Optional[InventoryItem]
    usage_unit: Optional[UsageUnit]  # resolved; None only when the item is missing and no unit was given
    price_per_unit: float
    cost: float

    @property
    def resolved(self) -> bool:
        return self.item is not None


@dataclass(frozen=True)
class RecipeCosting:
    total: float
    lines: list[LineCost] = field(default_factory=list)
    unresolved_ids: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.unresolved_ids


@dataclass(frozen=True)
class ModifierCosting:
    """Added cost of one modifier; `lines` covers its add/replace actions only."""
    modifier: Modifier
    total: float
    lines: list[LineCost] = field(default_factory=list)
    unresolved_ids: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.unresolved_ids


@dataclass(frozen=True)
class Profitability:
    cost: float
    profit: float
    food_cost_percent: float
    band: FoodCostBand


@dataclass(frozen=True)
class PriceBreakdownRow:
    usage_unit: UsageUnit
    price_per_unit: float


class InventoryLookup(Protocol):
    def get_inventory_item(self, item_id: str) -> Optional[InventoryItem]:
        ...


class InMemoryInventory:
    """InventoryLookup over a fixed snapshot of items."""

    def __init__(self, items: Iterable[InventoryItem] = ()):
        self._items = {item.id: item for item in items}

    def get_inventory_item(self, item_id: str) -> Optional[InventoryItem]:
        return self._items.get(item_id)
