from pydantic import BaseModel, Field


class InventoryItemCreate(BaseModel):
    name: str
    purchase_unit: str
    package_size: float = Field(default=1.0, gt=0)
    package_price: float = Field(default=0.0, ge=0)


class InventoryItemRead(BaseModel):
    id: int
    name: str
    purchase_unit: str
    purchase_unit_label: str
    package_size: float
    package_price: float
    unit_price: float
    compatible_units: list[str]


class PriceBreakdownEntry(BaseModel):
    usage_unit: str
    price_per_unit: float
    display: str  # e.g. "$0.0300/oz"


class IngredientLineIn(BaseModel):
    inventory_item_id: int | str
    quantity: float
    usage_unit: str


class ModifierActionIn(BaseModel):
    action: str  # add | replace | multiply
    quantity: float
    inventory_item_id: int | str | None = None
    usage_unit: str | None = None


class ModifierIn(BaseModel):
    name: str
    kind: str  # add | replace | size
    price_adjustment: float = 0.0
    actions: list[ModifierActionIn] = []


class RecipeCostRequest(BaseModel):
    name: str = ""
    retail_price: float = 0.0
    ingredients: list[IngredientLineIn] = []
    modifiers: list[ModifierIn] = []


class LineCostOut(BaseModel):
    inventory_item_id: str
    inventory_name: str | None  # None when the reference is unresolved
    quantity: float
    usage_unit: str | None
    price_per_unit: float
    cost: float


class ProfitabilityOut(BaseModel):
    cost: float
    profit: float
    food_cost_percent: float
    band: str


class ModifierCostOut(BaseModel):
    name: str
    kind: str
    added_cost: float
    profitability: ProfitabilityOut
    unresolved_ids: list[str] = []


class RecipeCostResponse(BaseModel):
    name: str
    cost: float
    cost_display: str
    profitability: ProfitabilityOut
    lines: list[LineCostOut] = []
    modifiers: list[ModifierCostOut] = []
    unresolved_ids: list[str] = []


class IngredientCostRequest(BaseModel):
    quantity: float
    usage_unit: str
    purchase_price: float
    purchase_unit: str


class IngredientCostResponse(BaseModel):
    cost: float
    cost_display: str
    price_per_unit: float
