from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel

from menucost.services.costing.models import InventoryItem


class InventoryItemRecord(SQLModel, table=True):
    __tablename__ = "inventory_item"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    purchase_unit: str  # gallon | lb | oz | each | case | bag | box | pack
    package_size: float = 1.0
    package_price: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_item(self) -> InventoryItem:
        return InventoryItem(
            id=str(self.id),
            name=self.name,
            purchase_unit=self.purchase_unit,
            package_size=self.package_size,
            package_price=self.package_price,
        )
