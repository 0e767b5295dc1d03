"""
Service layer for the warehouse inventory.

Items are kept in memory, grouped by category: the store maps a
category name to the list of items in that category, in insertion
order.  A product id is unique within its category.  Nothing is
persisted; the store lives as long as the application that owns it.

Mutating operations (add, remove, clear) run under a single lock.
Read operations take the lock only to snapshot the category lists
and do their filtering and sorting outside it.

Invalid input (a missing item or product id) raises ``ValueError``.
Outcomes the caller is expected to handle, a full category on add or
an unknown product on remove, are reported through the boolean
return value instead.
"""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Dict, List, Optional, Tuple

from warehouse_inventory_api.app.schemas.inventory import InventoryItem, InventoryStatistics

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "UNCATEGORIZED"
MAX_ITEMS_PER_CATEGORY = 1000
DEFAULT_LOW_STOCK_THRESHOLD = 10


class InventoryService:
    """In-memory inventory store keyed by category."""

    def __init__(
        self,
        max_items_per_category: int = MAX_ITEMS_PER_CATEGORY,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self.max_items_per_category = max_items_per_category
        self.low_stock_threshold = low_stock_threshold
        self._store: Dict[str, List[InventoryItem]] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_item(self, item: Optional[InventoryItem]) -> bool:
        """Add a new item or merge it into an existing one.

        The category defaults to ``UNCATEGORIZED``.  When the category
        already holds an item with the same product id, the quantities
        are summed and the name, expiration date and unit price are
        taken from the incoming item when it provides them (a price
        only counts as provided when positive).

        Returns ``False`` when the item is new and its category is
        already at capacity; ``True`` otherwise.

        Raises
        ------
        ValueError
            If ``item`` or its ``product_id`` is ``None``.
        """
        if item is None or item.product_id is None:
            raise ValueError("Item and productId cannot be null")

        category = item.category if item.category is not None else DEFAULT_CATEGORY
        item.category = category

        with self._lock:
            category_items = self._store.setdefault(category, [])
            index = self._find_item_index(category_items, item.product_id)

            if index is not None:
                existing = category_items[index]
                existing.quantity += item.quantity
                if item.product_name:
                    existing.product_name = item.product_name
                if item.expiration_date is not None:
                    existing.expiration_date = item.expiration_date
                if item.unit_price > 0:
                    existing.unit_price = item.unit_price
                logger.info(
                    "Merged %s into category %s (quantity now %d)",
                    item.product_id,
                    category,
                    existing.quantity,
                )
                return True

            if len(category_items) >= self.max_items_per_category:
                logger.warning(
                    "Rejected %s: category %s is at capacity (%d items)",
                    item.product_id,
                    category,
                    self.max_items_per_category,
                )
                return False

            category_items.append(item.model_copy())
            logger.info("Added %s to category %s", item.product_id, category)
            return True

    def remove_item(self, product_id: Optional[str], quantity: Optional[int] = None) -> bool:
        """Remove an item, or part of its quantity, by product id.

        Categories are scanned in the order they were created and the
        first item with a matching product id is affected.  When
        ``quantity`` is ``None``, not positive, or at least the stored
        quantity, the item is deleted; otherwise its quantity is
        reduced by ``quantity``.  An emptied category stays in the
        store.

        Returns ``False`` if no item has the given product id.

        Raises
        ------
        ValueError
            If ``product_id`` is ``None``.
        """
        if product_id is None:
            raise ValueError("ProductId cannot be null")

        with self._lock:
            for category, category_items in self._store.items():
                index = self._find_item_index(category_items, product_id)
                if index is None:
                    continue

                item = category_items[index]
                if quantity is None or quantity <= 0 or quantity >= item.quantity:
                    del category_items[index]
                    logger.info("Removed %s from category %s", product_id, category)
                else:
                    item.quantity -= quantity
                    logger.info(
                        "Reduced %s in category %s by %d (quantity now %d)",
                        product_id,
                        category,
                        quantity,
                        item.quantity,
                    )
                return True

        logger.warning("Cannot remove %s: item not found", product_id)
        return False

    def clear_inventory(self) -> None:
        """Drop every category and item."""
        with self._lock:
            self._store.clear()
        logger.info("Inventory cleared")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_all_items(self) -> List[InventoryItem]:
        """Return every item, category by category."""
        return [item for _, items in self._snapshot() for item in items]

    def get_all_items_sorted_by_quantity(self) -> List[InventoryItem]:
        """Return every item ordered by ascending quantity.

        The sort is stable, so items with equal quantities keep their
        category and insertion order.
        """
        return sorted(self.get_all_items(), key=lambda item: item.quantity)

    def get_all_items_sorted_by_expiration_date(self) -> List[InventoryItem]:
        """Return every item ordered by ascending expiration date.

        Items without an expiration date come last.
        """
        return sorted(self.get_all_items(), key=_expiration_sort_key)

    def get_items_by_category(self, category: str) -> List[InventoryItem]:
        """Return the items of ``category``; unknown categories yield ``[]``."""
        with self._lock:
            return list(self._store.get(category, []))

    def get_item_by_id(self, product_id: str) -> Optional[InventoryItem]:
        """Return the first item with ``product_id`` or ``None``."""
        for item in self.get_all_items():
            if item.product_id == product_id:
                return item
        return None

    def get_2d_representation(self) -> Dict[str, List[List[InventoryItem]]]:
        """Return each category's items as a single-row table."""
        return {category: [items] for category, items in self._snapshot()}

    def resolve_low_stock_threshold(self, threshold: Optional[int] = None) -> int:
        """Return the threshold ``get_low_stock_items`` applies.

        A missing or non-positive value falls back to the configured
        default.
        """
        if threshold is not None and threshold > 0:
            return threshold
        return self.low_stock_threshold

    def get_low_stock_items(self, threshold: Optional[int] = None) -> List[InventoryItem]:
        """Return items whose quantity is at or below the threshold.

        Results are ordered by ascending quantity.
        """
        limit = self.resolve_low_stock_threshold(threshold)
        low = [item for item in self.get_all_items() if item.quantity <= limit]
        logger.debug("Found %d low stock items at threshold %d", len(low), limit)
        return sorted(low, key=lambda item: item.quantity)

    def get_statistics(self) -> InventoryStatistics:
        """Summarise the inventory."""
        snapshot = self._snapshot()
        all_items = [item for _, items in snapshot for item in items]
        low_stock = [item for item in all_items if item.quantity <= self.low_stock_threshold]
        return InventoryStatistics(
            total_items=len(all_items),
            total_quantity=sum(item.quantity for item in all_items),
            categories_count=len(snapshot),
            low_stock_count=len(low_stock),
            low_stock_threshold=self.low_stock_threshold,
            categories=[category for category, _ in snapshot],
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _snapshot(self) -> List[Tuple[str, List[InventoryItem]]]:
        with self._lock:
            return [(category, list(items)) for category, items in self._store.items()]

    @staticmethod
    def _find_item_index(items: List[InventoryItem], product_id: str) -> Optional[int]:
        for index, item in enumerate(items):
            if item.product_id == product_id:
                return index
        return None


def _expiration_sort_key(item: InventoryItem) -> Tuple[bool, date]:
    # Undated items sort after every dated one.
    return (item.expiration_date is None, item.expiration_date or date.min)
