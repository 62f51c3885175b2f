"""
Exceptions raised by the costing core.
"""


class CostingError(Exception):
    """Base exception for costing errors."""
    pass


class InvalidUnitError(CostingError, ValueError):
    """Raised when a unit string does not name a known purchase or usage unit."""

    def __init__(self, unit, kind="unit", message=None):
        self.unit = unit
        self.kind = kind
        if message is None:
            message = f"Unknown {kind} '{unit}'"
        super().__init__(message)


class IncompatibleUnitError(CostingError):
    """Raised when a usage unit cannot be drawn from a purchase unit."""

    def __init__(self, purchase_unit, usage_unit, message=None):
        self.purchase_unit = purchase_unit
        self.usage_unit = usage_unit
        if message is None:
            message = (
                f"Cannot use '{getattr(usage_unit, 'value', usage_unit)}' "
                f"for an item bought by the '{getattr(purchase_unit, 'value', purchase_unit)}'"
            )
        super().__init__(message)


class UnknownInventoryItemError(CostingError):
    """Raised by lookups that require the inventory item to exist."""

    def __init__(self, item_id, message=None):
        self.item_id = item_id
        if message is None:
            message = f"No inventory item with id '{item_id}'"
        super().__init__(message)
