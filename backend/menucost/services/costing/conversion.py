"""
Conversion engine: purchase-unit quantities to usage-unit quantities, and
purchase prices to per-usage-unit prices.
"""

from menucost.logging import get_logger
from menucost.services.costing.exceptions import IncompatibleUnitError
from menucost.services.costing.units import (
    COMPATIBLE_UNITS,
    GALLON_TO_ML,
    GALLON_TO_OZ,
    LB_TO_G,
    LB_TO_OZ,
    OZ_TO_G,
    OZ_TO_ML,
    PurchaseUnit,
    UsageUnit,
    parse_purchase_unit,
    parse_usage_unit,
)

logger = get_logger(__name__)

# (purchase unit, usage unit) -> usage units in one purchase unit
CONVERSION_FACTORS: dict[tuple[PurchaseUnit, UsageUnit], float] = {
    (PurchaseUnit.GALLON, UsageUnit.OZ): GALLON_TO_OZ,
    (PurchaseUnit.GALLON, UsageUnit.ML): GALLON_TO_ML,
    (PurchaseUnit.LB, UsageUnit.OZ): LB_TO_OZ,
    (PurchaseUnit.LB, UsageUnit.G): LB_TO_G,
    (PurchaseUnit.OZ, UsageUnit.ML): OZ_TO_ML,
    (PurchaseUnit.OZ, UsageUnit.G): OZ_TO_G,
}


def ensure_compatible(
    purchase_unit: PurchaseUnit | str, usage_unit: UsageUnit | str
) -> tuple[PurchaseUnit, UsageUnit]:
    """Parse both units and raise IncompatibleUnitError if the pairing is not allowed."""
    pu = parse_purchase_unit(purchase_unit)
    uu = parse_usage_unit(usage_unit)
    if uu not in COMPATIBLE_UNITS[pu]:
        raise IncompatibleUnitError(pu, uu)
    return pu, uu


def conversion_factor(
    purchase_unit: PurchaseUnit | str,
    usage_unit: UsageUnit | str,
    strict: bool = True,
) -> float:
    """
    Number of `usage_unit` in one `purchase_unit`.

    Same symbol (oz -> oz, each -> each) and discrete units are 1.
    With strict=False an unmapped pairing also yields 1 instead of raising.
    """
    pu = parse_purchase_unit(purchase_unit)
    uu = parse_usage_unit(usage_unit)

    if pu.value == uu.value:
        return 1.0

    factor = CONVERSION_FACTORS.get((pu, uu))
    if factor is not None:
        return float(factor)

    if uu in COMPATIBLE_UNITS[pu]:
        # discrete purchase units drawn as "each"
        return 1.0

    if strict:
        raise IncompatibleUnitError(pu, uu)
    logger.warning("conversion.unmapped purchase_unit=%s usage_unit=%s fallback=identity", pu.value, uu.value)
    return 1.0


def convert(
    quantity: float,
    from_unit: PurchaseUnit | str,
    to_unit: UsageUnit | str,
    strict: bool = True,
) -> float:
    """Convert `quantity` expressed in a purchase unit into the usage unit."""
    return quantity * conversion_factor(from_unit, to_unit, strict=strict)


def price_per_unit(
    purchase_price: float,
    purchase_unit: PurchaseUnit | str,
    target_unit: UsageUnit | str,
    strict: bool = True,
) -> float:
    """Price of one `target_unit` given the price of one `purchase_unit`. 0 if the factor is 0."""
    units_per_purchase = convert(1, purchase_unit, target_unit, strict=strict)
    if units_per_purchase == 0:
        return 0.0
    return purchase_price / units_per_purchase
