"""Per-unit price tables and display formatting for inventory items."""

from menucost.services.costing.conversion import price_per_unit
from menucost.services.costing.models import PriceBreakdownRow
from menucost.services.costing.units import PurchaseUnit, UsageUnit, compatible_units, parse_usage_unit

UNIT_PRICE_DECIMALS = 4
MONEY_DECIMALS = 2


def price_breakdown(purchase_price: float, purchase_unit: PurchaseUnit | str) -> list[PriceBreakdownRow]:
    """One row per compatible usage unit, in taxonomy order. Display only."""
    return [
        PriceBreakdownRow(usage_unit=unit, price_per_unit=price_per_unit(purchase_price, purchase_unit, unit))
        for unit in compatible_units(purchase_unit)
    ]


def round_unit_price(value: float, decimals: int = UNIT_PRICE_DECIMALS) -> float:
    return round(value, decimals)


def round_money(value: float, decimals: int = MONEY_DECIMALS) -> float:
    return round(value, decimals)


def format_money(value: float, decimals: int = MONEY_DECIMALS) -> str:
    return f"${value:.{decimals}f}"


def format_price_per_unit(
    price: float,
    purchase_unit: PurchaseUnit | str,
    display_unit: UsageUnit | str,
    decimals: int = UNIT_PRICE_DECIMALS,
) -> str:
    """e.g. 3.84 per gallon shown per oz -> '$0.0300/oz'."""
    unit = parse_usage_unit(display_unit)
    return f"${price_per_unit(price, purchase_unit, unit):.{decimals}f}/{unit.value}"
