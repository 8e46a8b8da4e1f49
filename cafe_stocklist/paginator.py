"""
Stock list report layout.

Lays out a page name and its category snapshot as positioned text on fixed
A4 sheets. Nothing here touches a PDF library: the output is a list of
``Page`` objects that a ``DocumentRenderer`` draws.

Coordinates are measured from the top-left corner, y growing downwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence

from .models import CategorySection

logger = logging.getLogger(__name__)

# ─── PAGE GEOMETRY ───
W, H = 595, 842  # A4 at 72 dpi
MARGIN = 40

TITLE_Y = 50
TIMESTAMP_Y = 75
CONTENT_TOP = 110

# a category starting below this line is left out of the report
CATEGORY_LIMIT = 700
# item rows below this line are left out of the report
ROW_LIMIT = H * 0.95

CATEGORY_LEADING = 20
ROW_LEADING = 18
CATEGORY_GAP = 10

# name, par level, closing stock, loading, total
COLUMN_X = (60, 250, 320, 390, 460)

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"


@dataclass(frozen=True)
class TextStyle:
    size: float = 9
    bold: bool = False


TITLE = TextStyle(18, bold=True)
TIMESTAMP = TextStyle(10)
CATEGORY_HEADER = TextStyle(12, bold=True)
ROW = TextStyle(9)


@dataclass(frozen=True)
class DrawInstruction:
    text: str
    x: float
    y: float
    style: TextStyle = ROW


@dataclass
class Page:
    number: int
    instructions: List[DrawInstruction] = field(default_factory=list)
    width: float = W
    height: float = H


def report_title(page_name):
    return f"{page_name} - Stock List Report"


class LayoutCursor:
    """Vertical write position over a run of pages"""

    def __init__(self):
        self.pages: List[Page] = []
        self.y = 0
        self.new_page()

    @property
    def page(self) -> Page:
        return self.pages[-1]

    def new_page(self):
        self.pages.append(Page(number=len(self.pages) + 1))
        self.y = 0

    def fits_category(self):
        return self.y <= CATEGORY_LIMIT

    def fits_row(self):
        return self.y <= ROW_LIMIT

    def draw_text(self, text, x, y=None, style=ROW):
        self.page.instructions.append(
            DrawInstruction(str(text), x, self.y if y is None else y, style)
        )

    def advance(self, amount):
        self.y += amount


class ReportPaginator:
    """
    Turns ``(page_name, categories)`` into laid-out report pages.

    Overflow policy: a category whose header would start past
    ``CATEGORY_LIMIT`` is dropped together with its items, and rows past
    ``ROW_LIMIT`` are dropped from the end of their category. Nothing spills
    onto a second page and nothing is raised. ``LayoutCursor.new_page`` is
    where a page break would go instead.
    """

    def paginate(self, page_name: str, categories: Sequence[CategorySection],
                 generated_at: datetime) -> List[Page]:
        cursor = LayoutCursor()
        self._draw_header(cursor, page_name, generated_at)
        cursor.y = CONTENT_TOP

        for category in categories:
            if not cursor.fits_category():
                logger.debug("report %r: category %r dropped at y=%s",
                             page_name, category.name, cursor.y)
                continue
            self._draw_category(cursor, category, page_name)

        return cursor.pages

    # ─── SECTIONS ───

    def _draw_header(self, cursor, page_name, generated_at):
        cursor.draw_text(report_title(page_name), MARGIN, TITLE_Y, TITLE)
        cursor.draw_text(generated_at.strftime(TIMESTAMP_FORMAT), MARGIN, TIMESTAMP_Y, TIMESTAMP)

    def _draw_category(self, cursor, category, page_name):
        cursor.draw_text(category.name, MARGIN, style=CATEGORY_HEADER)
        cursor.advance(CATEGORY_LEADING)

        for index, item in enumerate(category.items):
            if not cursor.fits_row():
                logger.debug("report %r: %d row(s) of %r dropped",
                             page_name, len(category.items) - index, category.name)
                break
            values = (item.name, item.par_level, item.closing_stock,
                      item.loading_at_akl, item.total)
            for x, value in zip(COLUMN_X, values):
                cursor.draw_text(value, x, style=ROW)
            cursor.advance(ROW_LEADING)

        cursor.advance(CATEGORY_GAP)
