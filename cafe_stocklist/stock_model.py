from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .errors import StockIndexError
from .models import CategorySection, Snapshot, StockItem, parse_count

logger = logging.getLogger(__name__)


class StockModel:
    """
    The category/item tree for one stock list.

    ``categories`` always holds an immutable snapshot. Every operation builds
    a new snapshot, swaps the reference and returns it; an invalid position
    raises before anything is built, leaving the current snapshot in place.
    """

    def __init__(self, categories: Iterable[CategorySection] = ()):
        self.categories: Snapshot = tuple(categories)

    # -------------------------
    # Internal
    # -------------------------
    def _category(self, category_index: int) -> CategorySection:
        cats = self.categories
        if not 0 <= category_index < len(cats):
            raise StockIndexError("category", category_index, len(cats))
        return cats[category_index]

    def _item_category(self, category_index: int, item_index: int) -> CategorySection:
        cat = self._category(category_index)
        if not 0 <= item_index < len(cat.items):
            raise StockIndexError("item", item_index, len(cat.items))
        return cat

    def _publish(self, categories) -> Snapshot:
        self.categories = tuple(categories)
        return self.categories

    def _replace_category(self, category_index: int, section: CategorySection) -> Snapshot:
        cats = list(self.categories)
        cats[category_index] = section
        return self._publish(cats)

    # -------------------------
    # Mutations
    # -------------------------
    def add_category(self, name: str) -> Snapshot:
        name = (name or "").strip()
        if not name:
            logger.debug("add_category ignored: blank name")
            return self.categories
        logger.debug("add_category %r", name.upper())
        return self._publish(self.categories + (CategorySection(name.upper()),))

    def add_item(self, category_index: int, name: str, par_level: str = "") -> Snapshot:
        cat = self._category(category_index)
        name = (name or "").strip()
        if not name:
            logger.debug("add_item ignored: blank name")
            return self.categories
        item = StockItem(name=name, par_level=(par_level or "").strip())
        logger.debug("add_item %r to %r", name, cat.name)
        return self._replace_category(category_index, cat.with_items(cat.items + (item,)))

    def update_item(self, category_index: int, item_index: int,
                    closing_stock: Optional[str] = None,
                    loading_at_akl: Optional[str] = None) -> Snapshot:
        cat = self._item_category(category_index, item_index)
        items = list(cat.items)
        items[item_index] = items[item_index].with_counts(closing_stock, loading_at_akl)
        return self._replace_category(category_index, cat.with_items(items))

    def delete_item(self, category_index: int, item_index: int) -> Snapshot:
        cat = self._item_category(category_index, item_index)
        logger.debug("delete_item %r from %r", cat.items[item_index].name, cat.name)
        items = cat.items[:item_index] + cat.items[item_index + 1:]
        return self._replace_category(category_index, cat.with_items(items))

    def move_item(self, category_index: int, item_index: int, offset: int) -> Snapshot:
        """Swap an item with the neighbour ``offset`` places away (-1 up, +1 down)."""
        cat = self._item_category(category_index, item_index)
        target = item_index + offset
        if offset == 0 or not 0 <= target < len(cat.items):
            return self.categories
        items = list(cat.items)
        items[item_index], items[target] = items[target], items[item_index]
        return self._replace_category(category_index, cat.with_items(items))

    def clear_all(self) -> Snapshot:
        logger.debug("clear_all over %d categories", len(self.categories))
        return self._publish(
            cat.with_items(it.cleared() for it in cat.items) for cat in self.categories
        )

    # -------------------------
    # Read helpers
    # -------------------------
    def item_count(self) -> int:
        return sum(len(cat.items) for cat in self.categories)

    def completed_count(self) -> int:
        """Items with a non-zero total, the "done" side of item_count()"""
        return sum(1 for cat in self.categories for it in cat.items if parse_count(it.total) != 0)

    def below_par(self) -> List[Tuple[str, StockItem]]:
        out = []
        for cat in self.categories:
            for it in cat.items:
                if it.below_par:
                    out.append((cat.name, it))
        return out
