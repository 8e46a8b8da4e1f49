"""
Stock list value objects.

Items and categories are frozen; a "change" always builds a new object, so a
snapshot handed out to a caller can never be altered behind its back.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

ZERO = "0"

_COUNT = re.compile(r"[+-]?[0-9]+")


def parse_count(value) -> int:
    """Integer value of a count field; blank or non-numeric text counts as 0."""
    # plain ASCII digits only: padded, underscored or non-ASCII digit text counts as 0
    if not isinstance(value, str) or not _COUNT.fullmatch(value):
        return 0
    return int(value)


def new_item_id() -> str:
    return uuid.uuid4().hex


def derive_total(closing_stock, loading_at_akl) -> str:
    return str(parse_count(closing_stock) + parse_count(loading_at_akl))


@dataclass(frozen=True)
class StockItem:
    name: str
    par_level: str = ""
    closing_stock: str = ZERO
    loading_at_akl: str = ZERO
    total: str = ZERO
    id: str = field(default_factory=new_item_id)

    def __post_init__(self):
        # total is cached, never trusted from the caller
        object.__setattr__(self, "total", derive_total(self.closing_stock, self.loading_at_akl))

    def with_counts(self, closing_stock: Optional[str] = None,
                    loading_at_akl: Optional[str] = None) -> "StockItem":
        """Copy with new closing/loading values; total is recomputed."""
        closing = self.closing_stock if closing_stock is None else closing_stock
        loading = self.loading_at_akl if loading_at_akl is None else loading_at_akl
        return replace(self, closing_stock=closing, loading_at_akl=loading)

    def cleared(self) -> "StockItem":
        return replace(self, closing_stock=ZERO, loading_at_akl=ZERO)

    @property
    def below_par(self) -> bool:
        # uncounted items (total 0) are never flagged
        par = parse_count(self.par_level)
        total = parse_count(self.total)
        return par > 0 and 0 < total < par


@dataclass(frozen=True)
class CategorySection:
    name: str
    items: Tuple[StockItem, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        ids = [it.id for it in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate item id in category {self.name!r}")

    def with_items(self, items) -> "CategorySection":
        return replace(self, items=tuple(items))


Snapshot = Tuple[CategorySection, ...]
