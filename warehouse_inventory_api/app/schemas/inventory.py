"""
Pydantic models for inventory data.

``InventoryItem`` is both the request body of ``POST /add`` and the
record kept by the in‑memory store.  JSON payloads use camelCase
field names (``productId``, ``unitPrice`` ...); Python code uses the
snake_case attribute names.  Either form is accepted on input.

The remaining models describe the response envelopes.  Every
envelope carries ``success`` and, depending on the endpoint, a
message, an item, a list of items with metadata, the statistics
rollup or the per‑category 2D view.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class InventoryItem(BaseModel):
    """A product held in the warehouse.

    Two items are equal when their ``product_id`` matches; the other
    fields do not take part in equality or hashing.
    """

    product_id: Optional[str] = Field(None, alias="productId", examples=["A1"])
    product_name: Optional[str] = Field(None, alias="productName", examples=["Green apples"])
    quantity: int = Field(0, examples=[25])
    expiration_date: Optional[date] = Field(None, alias="expirationDate", examples=["2026-11-30"])
    category: Optional[str] = Field(None, examples=["produce"])
    unit_price: float = Field(0.0, alias="unitPrice", examples=[0.45])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def _null_as_zero(cls, v):
        # An explicit null counts as zero, like an omitted field.
        return 0 if v is None else v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return self.product_id == other.product_id

    def __hash__(self) -> int:
        return hash(self.product_id)


class InventoryStatistics(BaseModel):
    """Aggregated figures across the whole inventory."""

    total_items: int = Field(..., alias="totalItems")
    total_quantity: int = Field(..., alias="totalQuantity")
    categories_count: int = Field(..., alias="categoriesCount")
    low_stock_count: int = Field(..., alias="lowStockCount")
    low_stock_threshold: int = Field(..., alias="lowStockThreshold")
    categories: List[str] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
    }


class MessageResponse(BaseModel):
    success: bool
    message: Optional[str] = None


class ItemResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    item: InventoryItem


class ItemListResponse(BaseModel):
    success: bool = True
    items: List[InventoryItem]
    count: int


class SortedItemsResponse(ItemListResponse):
    sort_by: str = Field(..., alias="sortBy")

    model_config = {
        "populate_by_name": True,
    }


class CategoryItemsResponse(ItemListResponse):
    category: str


class LowStockResponse(ItemListResponse):
    threshold: int


class StatisticsResponse(BaseModel):
    success: bool = True
    statistics: InventoryStatistics


class Inventory2DResponse(BaseModel):
    success: bool = True
    inventory_2d: Dict[str, List[List[InventoryItem]]] = Field(..., alias="inventory2D")
    structure: str = "Each category contains a 2D array [1][n] where n is the number of items"

    model_config = {
        "populate_by_name": True,
    }
