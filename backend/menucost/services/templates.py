"""
Standard coffee-shop recipe templates and auto-linking of their ingredients
to a store's inventory by name.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from menucost.logging import get_logger
from menucost.services.costing.models import IngredientLine, InventoryItem, Recipe
from menucost.services.costing.units import UsageUnit

logger = get_logger(__name__)


@dataclass(frozen=True)
class TemplateIngredient:
    inventory_name: str
    quantity: float
    usage_unit: UsageUnit
    match_terms: tuple[str, ...]


@dataclass(frozen=True)
class RecipeTemplate:
    name: str
    category: str
    retail_price: float
    ingredients: tuple[TemplateIngredient, ...]


_ESPRESSO_TERMS = ("espresso", "coffee bean", "coffee")
_MILK_TERMS = ("milk", "whole milk", "2% milk", "dairy")
_CHOCOLATE_TERMS = ("chocolate", "cocoa", "mocha")


def _espresso(qty: float) -> TemplateIngredient:
    return TemplateIngredient("Espresso", qty, UsageUnit.OZ, _ESPRESSO_TERMS)


def _milk(qty: float) -> TemplateIngredient:
    return TemplateIngredient("Whole Milk", qty, UsageUnit.OZ, _MILK_TERMS)


def _chocolate(qty: float) -> TemplateIngredient:
    return TemplateIngredient("Chocolate Syrup", qty, UsageUnit.OZ, _CHOCOLATE_TERMS)


def _drip(qty: float) -> TemplateIngredient:
    return TemplateIngredient("Drip Coffee", qty, UsageUnit.OZ, ("drip", "brew", "coffee"))


COFFEE_SHOP_TEMPLATES: tuple[RecipeTemplate, ...] = (
    RecipeTemplate("Latte 12oz", "Espresso Drinks", 5.50, (_espresso(2), _milk(10))),
    RecipeTemplate("Latte 16oz", "Espresso Drinks", 6.50, (_espresso(2), _milk(14))),
    RecipeTemplate("Cappuccino 8oz", "Espresso Drinks", 4.75, (_espresso(2), _milk(4))),
    RecipeTemplate("Cappuccino 12oz", "Espresso Drinks", 5.25, (_espresso(2), _milk(6))),
    RecipeTemplate("Americano 12oz", "Espresso Drinks", 4.00, (_espresso(2),)),
    RecipeTemplate("Americano 16oz", "Espresso Drinks", 4.50, (_espresso(3),)),
    RecipeTemplate("Espresso Shot", "Espresso Drinks", 3.00, (_espresso(1),)),
    RecipeTemplate("Double Espresso", "Espresso Drinks", 3.75, (_espresso(2),)),
    RecipeTemplate("Mocha 12oz", "Espresso Drinks", 6.00, (_espresso(2), _milk(8), _chocolate(1))),
    RecipeTemplate(
        "Vanilla Latte 12oz",
        "Espresso Drinks",
        6.00,
        (
            _espresso(2),
            _milk(9),
            TemplateIngredient("Vanilla Syrup", 1, UsageUnit.OZ, ("vanilla", "syrup")),
        ),
    ),
    RecipeTemplate("Drip Coffee 12oz", "Brewed Coffee", 3.00, (_drip(12),)),
    RecipeTemplate("Drip Coffee 16oz", "Brewed Coffee", 3.50, (_drip(16),)),
    RecipeTemplate("Hot Chocolate 12oz", "Non-Coffee", 4.50, (_milk(10), _chocolate(2))),
    RecipeTemplate(
        "Chai Latte 12oz",
        "Non-Coffee",
        5.50,
        (
            TemplateIngredient("Chai Concentrate", 4, UsageUnit.OZ, ("chai", "tea")),
            _milk(8),
        ),
    ),
)


def find_matching_inventory(
    match_terms: Iterable[str], items: Iterable[InventoryItem]
) -> Optional[InventoryItem]:
    """First inventory item whose name contains any of the match terms (case-insensitive)."""
    terms = [t.lower() for t in match_terms]
    for item in items:
        name = item.name.lower()
        if any(term in name for term in terms):
            return item
    return None


def template_match_info(template: RecipeTemplate, items: Iterable[InventoryItem]) -> tuple[int, int]:
    """Return (matched ingredient count, total ingredient count)."""
    items = list(items)
    matched = sum(1 for ing in template.ingredients if find_matching_inventory(ing.match_terms, items))
    return matched, len(template.ingredients)


def build_recipe_from_template(
    template: RecipeTemplate, items: Iterable[InventoryItem], recipe_id: Optional[str] = None
) -> tuple[Recipe, list[str]]:
    """
    Turn a template into a Recipe linked to the given inventory.
    Ingredients with no matching item are left out and returned by name.
    """
    items = list(items)
    lines: list[IngredientLine] = []
    unmatched: list[str] = []
    for ing in template.ingredients:
        match = find_matching_inventory(ing.match_terms, items)
        if match is None:
            unmatched.append(ing.inventory_name)
            continue
        lines.append(IngredientLine(inventory_item_id=match.id, quantity=ing.quantity, usage_unit=ing.usage_unit))
    if unmatched:
        logger.info("templates.unmatched template=%s missing=%s", template.name, ",".join(unmatched))
    recipe = Recipe(
        id=recipe_id or template.name,
        name=template.name,
        retail_price=template.retail_price,
        ingredients=tuple(lines),
        category=template.category,
    )
    return recipe, unmatched


def match_inventory_to_template(
    inventory_name: str, templates: Iterable[RecipeTemplate] = COFFEE_SHOP_TEMPLATES
) -> list[str]:
    """Template ingredient names an inventory item could stand in for, in first-seen order."""
    name = inventory_name.lower()
    matches: list[str] = []
    for template in templates:
        for ing in template.ingredients:
            if any(term.lower() in name for term in ing.match_terms) and ing.inventory_name not in matches:
                matches.append(ing.inventory_name)
    return matches


def templates_by_category(
    templates: Iterable[RecipeTemplate] = COFFEE_SHOP_TEMPLATES,
) -> dict[str, list[RecipeTemplate]]:
    grouped: dict[str, list[RecipeTemplate]] = {}
    for template in templates:
        grouped.setdefault(template.category, []).append(template)
    return grouped
