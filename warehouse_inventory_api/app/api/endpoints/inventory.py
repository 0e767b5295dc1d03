"""
Inventory endpoints.

These routes expose the in‑memory inventory store: adding and
removing stock, listing items (unsorted, by quantity, by expiration
date, by category), single item lookup, the per‑category 2D view,
low‑stock filtering and the statistics rollup.

Every response is an envelope with a ``success`` flag.  Failures are
raised as ``HTTPException`` and rendered as
``{"success": false, "message": ...}`` by the handler installed in
``main.create_app``.

Routes with a fixed path are declared before ``/{product_id}`` so
that, for example, ``/statistics`` is never read as a product id.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status

from warehouse_inventory_api.app.api.deps import get_inventory_service
from warehouse_inventory_api.app.schemas.inventory import (
    CategoryItemsResponse,
    Inventory2DResponse,
    InventoryItem,
    ItemListResponse,
    ItemResponse,
    LowStockResponse,
    MessageResponse,
    SortedItemsResponse,
    StatisticsResponse,
)
from warehouse_inventory_api.app.services.inventory_service import InventoryService

router = APIRouter()


@router.post(
    "/add",
    response_model=ItemResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_409_CONFLICT: {"model": MessageResponse},
    },
)
async def add_item(
    item: Optional[InventoryItem] = Body(None),
    service: InventoryService = Depends(get_inventory_service),
) -> ItemResponse:
    """Add an item, or merge it into the item with the same product id.

    Returns HTTP 409 when the item is new and its category is full.
    """
    try:
        added = service.add_item(item)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not added:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Failed to add item: Category capacity exceeded",
        )
    return ItemResponse(success=True, message="Item added successfully", item=item)


@router.delete(
    "/remove/{product_id}",
    response_model=MessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    },
)
async def remove_item(
    product_id: str = Path(..., description="Product to remove"),
    quantity: Optional[int] = Query(None, description="Units to remove; omit to remove the item"),
    service: InventoryService = Depends(get_inventory_service),
) -> MessageResponse:
    """Remove an item or reduce its quantity."""
    try:
        removed = service.remove_item(product_id, quantity)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    if quantity is not None and quantity > 0:
        message = "Quantity reduced successfully"
    else:
        message = "Item removed successfully"
    return MessageResponse(success=True, message=message)


@router.get("/all", response_model=ItemListResponse)
async def get_all_items(
    service: InventoryService = Depends(get_inventory_service),
) -> ItemListResponse:
    items = service.get_all_items()
    return ItemListResponse(items=items, count=len(items))


@router.get("/sorted/quantity", response_model=SortedItemsResponse)
async def get_items_sorted_by_quantity(
    service: InventoryService = Depends(get_inventory_service),
) -> SortedItemsResponse:
    items = service.get_all_items_sorted_by_quantity()
    return SortedItemsResponse(items=items, count=len(items), sort_by="quantity")


@router.get("/sorted/expiration", response_model=SortedItemsResponse)
async def get_items_sorted_by_expiration_date(
    service: InventoryService = Depends(get_inventory_service),
) -> SortedItemsResponse:
    """Items by expiration date, earliest first; undated items last."""
    items = service.get_all_items_sorted_by_expiration_date()
    return SortedItemsResponse(items=items, count=len(items), sort_by="expirationDate")


@router.get("/category/{category}", response_model=CategoryItemsResponse)
async def get_items_by_category(
    category: str,
    service: InventoryService = Depends(get_inventory_service),
) -> CategoryItemsResponse:
    """Items of one category.  Unknown categories return an empty list."""
    items = service.get_items_by_category(category)
    return CategoryItemsResponse(items=items, count=len(items), category=category)


@router.get("/2d-array", response_model=Inventory2DResponse)
async def get_inventory_as_2d_array(
    service: InventoryService = Depends(get_inventory_service),
) -> Inventory2DResponse:
    return Inventory2DResponse(inventory_2d=service.get_2d_representation())


@router.get(
    "/low-stock",
    response_model=LowStockResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def get_low_stock_items(
    threshold: Optional[int] = Query(None, description="Defaults to the configured threshold when missing or not positive"),
    service: InventoryService = Depends(get_inventory_service),
) -> LowStockResponse:
    """Items with quantity at or below ``threshold``, lowest first."""
    items = service.get_low_stock_items(threshold)
    return LowStockResponse(
        items=items,
        count=len(items),
        threshold=service.resolve_low_stock_threshold(threshold),
    )


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    service: InventoryService = Depends(get_inventory_service),
) -> StatisticsResponse:
    return StatisticsResponse(statistics=service.get_statistics())


@router.get(
    "/{product_id}",
    response_model=ItemResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
)
async def get_item_by_id(
    product_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> ItemResponse:
    """Retrieve a single item by product id.

    Returns HTTP 404 if no category holds the product.
    """
    item = service.get_item_by_id(product_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return ItemResponse(success=True, item=item)
