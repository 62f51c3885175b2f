"""
Recipe aggregation: ingredient cost sums, modifier deltas and food-cost
classification.

Size modifiers scale the TOTAL base cost (`multiply` actions), not each
ingredient; a quantity of 1.15 adds 15% of the base recipe cost.
"""

from typing import Iterable

from menucost.logging import get_logger
from menucost.services.costing.ingredients import cost_line
from menucost.services.costing.models import (
    FoodCostBand,
    IngredientLine,
    InventoryLookup,
    Modifier,
    ModifierAction,
    ModifierCosting,
    Profitability,
    Recipe,
    RecipeCosting,
)

logger = get_logger(__name__)

HEALTHY_MAX_PERCENT = 30.0
BORDERLINE_MAX_PERCENT = 35.0


def cost_recipe(
    lines: Iterable[IngredientLine], inventory: InventoryLookup, strict: bool = True
) -> RecipeCosting:
    """Cost every line; unresolved references contribute 0 and are reported, not raised."""
    costed = [cost_line(line, inventory, strict=strict) for line in lines]
    unresolved = [c.line.inventory_item_id for c in costed if not c.resolved]
    total = sum(c.cost for c in costed)
    if unresolved:
        logger.info("costing.recipe_incomplete unresolved=%s total=%.4f", len(unresolved), total)
    return RecipeCosting(total=total, lines=costed, unresolved_ids=unresolved)


def recipe_cost(
    lines: Iterable[IngredientLine], inventory: InventoryLookup, strict: bool = True
) -> float:
    return cost_recipe(lines, inventory, strict=strict).total


def cost_modifier(
    modifier: Modifier,
    base_lines: Iterable[IngredientLine],
    inventory: InventoryLookup,
    strict: bool = True,
) -> ModifierCosting:
    """
    Added cost of applying `modifier` on top of the base recipe.
    Unresolved add/replace references contribute 0 and are reported.
    """
    base_lines = list(base_lines)
    total = 0.0
    base_total = None
    costed = []
    for action in modifier.actions:
        if action.action == ModifierAction.MULTIPLY:
            if base_total is None:
                base_total = recipe_cost(base_lines, inventory, strict=strict)
            total += base_total * (action.quantity - 1)
            continue
        line = action.as_line()
        if line is None:
            continue
        c = cost_line(line, inventory, strict=strict)
        costed.append(c)
        total += c.cost
    unresolved = [c.line.inventory_item_id for c in costed if not c.resolved]
    if unresolved:
        logger.info("costing.modifier_incomplete modifier=%s unresolved=%s", modifier.name, len(unresolved))
    return ModifierCosting(modifier=modifier, total=total, lines=costed, unresolved_ids=unresolved)


def modifier_cost(
    modifier: Modifier,
    base_lines: Iterable[IngredientLine],
    inventory: InventoryLookup,
    strict: bool = True,
) -> float:
    return cost_modifier(modifier, base_lines, inventory, strict=strict).total


def food_cost_band(food_cost_percent: float) -> FoodCostBand:
    if food_cost_percent <= HEALTHY_MAX_PERCENT:
        return FoodCostBand.HEALTHY
    if food_cost_percent <= BORDERLINE_MAX_PERCENT:
        return FoodCostBand.BORDERLINE
    return FoodCostBand.HIGH


def profitability(retail_price: float, cost: float) -> Profitability:
    food_cost_percent = (cost / retail_price) * 100 if retail_price > 0 else 0.0
    return Profitability(
        cost=cost,
        profit=retail_price - cost,
        food_cost_percent=food_cost_percent,
        band=food_cost_band(food_cost_percent),
    )


def recipe_profitability(recipe: Recipe, inventory: InventoryLookup, strict: bool = True) -> Profitability:
    return profitability(recipe.retail_price, recipe_cost(recipe.ingredients, inventory, strict=strict))


def modified_profitability(
    recipe: Recipe, modifier: Modifier, inventory: InventoryLookup, strict: bool = True
) -> Profitability:
    """Profitability of `recipe` sold with `modifier` applied (cost and price both adjusted)."""
    base = recipe_cost(recipe.ingredients, inventory, strict=strict)
    extra = modifier_cost(modifier, recipe.ingredients, inventory, strict=strict)
    return profitability(recipe.retail_price + modifier.price_adjustment, base + extra)
