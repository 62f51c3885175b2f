from fastapi import APIRouter, HTTPException

from menucost.config import settings
from menucost.logging import get_logger
from menucost.schemas.costing import (
    LineCostOut,
    ModifierCostOut,
    ProfitabilityOut,
    RecipeCostRequest,
    RecipeCostResponse,
)
from menucost.services.costing import (
    CostingError,
    IngredientLine,
    Modifier,
    ModifierIngredientAction,
    Profitability,
    cost_modifier,
    cost_recipe,
    format_money,
    profitability,
)
from menucost.storage import db
from menucost.storage.repositories import SqlInventory

router = APIRouter()
logger = get_logger(__name__)


def _profitability_out(p: Profitability) -> ProfitabilityOut:
    return ProfitabilityOut(
        cost=p.cost,
        profit=p.profit,
        food_cost_percent=p.food_cost_percent,
        band=p.band.value,
    )


def _parse_request(body: RecipeCostRequest) -> tuple[list[IngredientLine], list[Modifier]]:
    lines = [
        IngredientLine(inventory_item_id=str(ing.inventory_item_id), quantity=ing.quantity, usage_unit=ing.usage_unit)
        for ing in body.ingredients
    ]
    modifiers = [
        Modifier(
            name=m.name,
            kind=m.kind,
            price_adjustment=m.price_adjustment,
            actions=[
                ModifierIngredientAction(
                    action=a.action,
                    quantity=a.quantity,
                    inventory_item_id=str(a.inventory_item_id) if a.inventory_item_id is not None else None,
                    usage_unit=a.usage_unit,
                )
                for a in m.actions
            ],
        )
        for m in body.modifiers
    ]
    return lines, modifiers


@router.post("/recipes/cost", response_model=RecipeCostResponse)
def post_recipe_cost(body: RecipeCostRequest) -> RecipeCostResponse:
    """
    Cost a recipe against stored inventory.
    Lines pointing at missing inventory cost 0 and are listed in unresolved_ids.
    """
    strict = settings.strict_unit_pairing
    try:
        lines, modifiers = _parse_request(body)
    except (CostingError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    with db.get_session() as session:
        inventory = SqlInventory(session)
        try:
            costing = cost_recipe(lines, inventory, strict=strict)
            modifier_rows = []
            for m in modifiers:
                modifier_costing = cost_modifier(m, lines, inventory, strict=strict)
                added = modifier_costing.total
                modifier_rows.append(
                    ModifierCostOut(
                        name=m.name,
                        kind=m.kind.value,
                        added_cost=added,
                        unresolved_ids=modifier_costing.unresolved_ids,
                        profitability=_profitability_out(
                            profitability(body.retail_price + m.price_adjustment, costing.total + added)
                        ),
                    )
                )
        except CostingError as e:
            raise HTTPException(status_code=422, detail=str(e))

    logger.info(
        "recipes.cost name=%s lines=%s cost=%.4f unresolved=%s",
        body.name, len(lines), costing.total, len(costing.unresolved_ids),
    )
    return RecipeCostResponse(
        name=body.name,
        cost=costing.total,
        cost_display=format_money(costing.total, settings.money_decimals),
        profitability=_profitability_out(profitability(body.retail_price, costing.total)),
        lines=[
            LineCostOut(
                inventory_item_id=c.line.inventory_item_id,
                inventory_name=c.item.name if c.item else None,
                quantity=c.line.quantity,
                usage_unit=c.usage_unit.value if c.usage_unit else None,
                price_per_unit=c.price_per_unit,
                cost=c.cost,
            )
            for c in costing.lines
        ],
        modifiers=modifier_rows,
        unresolved_ids=costing.unresolved_ids,
    )
