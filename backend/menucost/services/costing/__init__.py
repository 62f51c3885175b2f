"""Unit conversion and recipe costing core. Pure and synchronous."""

from menucost.services.costing.breakdown import (
    format_money,
    format_price_per_unit,
    price_breakdown,
    round_money,
    round_unit_price,
)
from menucost.services.costing.conversion import conversion_factor, convert, ensure_compatible, price_per_unit
from menucost.services.costing.exceptions import (
    CostingError,
    IncompatibleUnitError,
    InvalidUnitError,
    UnknownInventoryItemError,
)
from menucost.services.costing.ingredients import cost_line, ingredient_cost, require_inventory_item
from menucost.services.costing.models import (
    FoodCostBand,
    IngredientLine,
    InMemoryInventory,
    InventoryItem,
    InventoryLookup,
    LineCost,
    Modifier,
    ModifierAction,
    ModifierCosting,
    ModifierIngredientAction,
    ModifierKind,
    PriceBreakdownRow,
    Profitability,
    Recipe,
    RecipeCosting,
)
from menucost.services.costing.recipes import (
    cost_modifier,
    cost_recipe,
    food_cost_band,
    modified_profitability,
    modifier_cost,
    profitability,
    recipe_cost,
    recipe_profitability,
)
from menucost.services.costing.units import (
    PURCHASE_UNIT_LABELS,
    USAGE_UNIT_LABELS,
    PurchaseUnit,
    UsageUnit,
    compatible_units,
    default_usage_unit,
    is_compatible,
    parse_purchase_unit,
    parse_usage_unit,
)

__all__ = [
    # Taxonomy
    "PurchaseUnit",
    "UsageUnit",
    "PURCHASE_UNIT_LABELS",
    "USAGE_UNIT_LABELS",
    "compatible_units",
    "default_usage_unit",
    "is_compatible",
    "parse_purchase_unit",
    "parse_usage_unit",
    # Conversion
    "conversion_factor",
    "convert",
    "ensure_compatible",
    "price_per_unit",
    # Costing
    "ingredient_cost",
    "cost_line",
    "require_inventory_item",
    "cost_recipe",
    "cost_modifier",
    "recipe_cost",
    "modifier_cost",
    "profitability",
    "recipe_profitability",
    "modified_profitability",
    "food_cost_band",
    # Breakdown
    "price_breakdown",
    "format_price_per_unit",
    "format_money",
    "round_money",
    "round_unit_price",
    # Types
    "FoodCostBand",
    "IngredientLine",
    "InMemoryInventory",
    "InventoryItem",
    "InventoryLookup",
    "LineCost",
    "Modifier",
    "ModifierAction",
    "ModifierCosting",
    "ModifierIngredientAction",
    "ModifierKind",
    "PriceBreakdownRow",
    "Profitability",
    "Recipe",
    "RecipeCosting",
    # Errors
    "CostingError",
    "IncompatibleUnitError",
    "InvalidUnitError",
    "UnknownInventoryItemError",
]
