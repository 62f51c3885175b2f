"""
Unit taxonomy: purchase units, usage units and which usage units each
purchase unit may be consumed in.
"""

from enum import Enum

from menucost.services.costing.exceptions import InvalidUnitError


class PurchaseUnit(str, Enum):
    GALLON = "gallon"
    LB = "lb"
    OZ = "oz"
    EACH = "each"
    CASE = "case"
    BAG = "bag"
    BOX = "box"
    PACK = "pack"


class UsageUnit(str, Enum):
    OZ = "oz"
    ML = "ml"
    G = "g"
    EACH = "each"


# Conversion constants: 1 gallon = 128 oz = 3785 ml, 1 lb = 16 oz = 453 g
GALLON_TO_OZ = 128
GALLON_TO_ML = 3785
OZ_TO_ML = 29.5735
LB_TO_OZ = 16
LB_TO_G = 453
OZ_TO_G = 28.35

# Ordered: first entry is the default display unit
COMPATIBLE_UNITS: dict[PurchaseUnit, tuple[UsageUnit, ...]] = {
    PurchaseUnit.GALLON: (UsageUnit.OZ, UsageUnit.ML),
    PurchaseUnit.LB: (UsageUnit.OZ, UsageUnit.G),
    PurchaseUnit.OZ: (UsageUnit.OZ, UsageUnit.ML, UsageUnit.G),  # volume or weight
    PurchaseUnit.EACH: (UsageUnit.EACH,),
    PurchaseUnit.CASE: (UsageUnit.EACH,),
    PurchaseUnit.BAG: (UsageUnit.EACH,),
    PurchaseUnit.BOX: (UsageUnit.EACH,),
    PurchaseUnit.PACK: (UsageUnit.EACH,),
}

PURCHASE_UNIT_LABELS = {
    PurchaseUnit.GALLON: "Gallon",
    PurchaseUnit.LB: "LB",
    PurchaseUnit.OZ: "OZ",
    PurchaseUnit.EACH: "Each",
    PurchaseUnit.CASE: "Case",
    PurchaseUnit.BAG: "Bag",
    PurchaseUnit.BOX: "Box",
    PurchaseUnit.PACK: "Pack",
}

USAGE_UNIT_LABELS = {unit: unit.value for unit in UsageUnit}

# Lowercase input -> canonical symbol
UNIT_ALIASES = {
    "gal": "gallon", "gallons": "gallon",
    "pound": "lb", "pounds": "lb", "lbs": "lb",
    "ounce": "oz", "ounces": "oz",
    "gram": "g", "grams": "g",
    "milliliter": "ml", "milliliters": "ml",
    "ea": "each",
    "cases": "case", "bags": "bag", "boxes": "box", "packs": "pack",
}

def _normalize(unit: str) -> str:
    s = str(unit).strip().lower()
    return UNIT_ALIASES.get(s, s)


def parse_purchase_unit(unit: PurchaseUnit | str) -> PurchaseUnit:
    if isinstance(unit, PurchaseUnit):
        return unit
    try:
        return PurchaseUnit(_normalize(unit))
    except ValueError:
        raise InvalidUnitError(unit, kind="purchase unit") from None


def parse_usage_unit(unit: UsageUnit | str) -> UsageUnit:
    if isinstance(unit, UsageUnit):
        return unit
    try:
        return UsageUnit(_normalize(unit))
    except ValueError:
        raise InvalidUnitError(unit, kind="usage unit") from None


def compatible_units(purchase_unit: PurchaseUnit | str) -> list[UsageUnit]:
    """Usage units an item bought in `purchase_unit` may be consumed in. Never empty."""
    return list(COMPATIBLE_UNITS[parse_purchase_unit(purchase_unit)])


def default_usage_unit(purchase_unit: PurchaseUnit | str) -> UsageUnit:
    return COMPATIBLE_UNITS[parse_purchase_unit(purchase_unit)][0]


def is_compatible(purchase_unit: PurchaseUnit | str, usage_unit: UsageUnit | str) -> bool:
    return parse_usage_unit(usage_unit) in COMPATIBLE_UNITS[parse_purchase_unit(purchase_unit)]
