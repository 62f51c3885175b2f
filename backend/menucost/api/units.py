"""Unit taxonomy and one-off ingredient costing."""

from fastapi import APIRouter, HTTPException

from menucost.config import settings
from menucost.schemas.costing import IngredientCostRequest, IngredientCostResponse
from menucost.services.costing import (
    PURCHASE_UNIT_LABELS,
    CostingError,
    PurchaseUnit,
    compatible_units,
    format_money,
    ingredient_cost,
    price_per_unit,
)

router = APIRouter()


@router.get("/units")
def get_units() -> dict:
    """Purchase units with their labels and compatible usage units (first = default)."""
    return {
        "purchase_units": [
            {
                "unit": unit.value,
                "label": PURCHASE_UNIT_LABELS[unit],
                "compatible_units": [u.value for u in compatible_units(unit)],
            }
            for unit in PurchaseUnit
        ]
    }


@router.post("/costing/ingredient", response_model=IngredientCostResponse)
def post_ingredient_cost(body: IngredientCostRequest) -> IngredientCostResponse:
    strict = settings.strict_unit_pairing
    try:
        cost = ingredient_cost(body.quantity, body.usage_unit, body.purchase_price, body.purchase_unit, strict=strict)
        unit_price = price_per_unit(body.purchase_price, body.purchase_unit, body.usage_unit, strict=strict)
    except CostingError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return IngredientCostResponse(
        cost=cost,
        cost_display=format_money(cost, settings.money_decimals),
        price_per_unit=unit_price,
    )
