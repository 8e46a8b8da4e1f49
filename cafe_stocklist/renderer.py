"""
PDF rendering of laid-out report pages with the reportlab canvas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas

from .paginator import H, W, Page

logger = logging.getLogger(__name__)

# ─── FONTS & COLORS ───
FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
CHARCOAL = HexColor("#2D3748")

PAGE_SIZE = (W, H)  # reportlab's A4 is 595.27 x 841.89; keep the layout's whole units


class DocumentRenderer(Protocol):
    def render(self, pages: Sequence[Page], path) -> Path:
        ...


class CanvasRenderer:
    """Draws ``Page`` instructions onto a reportlab canvas, one sheet per page"""

    def __init__(self, title="", author="Cafe Stock List", page_size=PAGE_SIZE):
        self.title = title
        self.author = author
        self.page_size = page_size

    def render(self, pages, path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        c = canvas.Canvas(str(path), pagesize=self.page_size)
        if self.title:
            c.setTitle(self.title)
        c.setAuthor(self.author)

        for page in pages:
            self._draw_page(c, page)
            c.showPage()
        c.save()

        logger.info("rendered %d page(s) to %s", len(pages), path)
        return path

    def _draw_page(self, c, page):
        height = self.page_size[1]
        for ins in page.instructions:
            self.draw_text(c, ins.text, ins.x, height - ins.y,
                           FONT_BOLD if ins.style.bold else FONT, ins.style.size)

    @staticmethod
    def draw_text(c, text, x, y, font=FONT, size=10, color=CHARCOAL):
        c.saveState()
        c.setFont(font, size)
        c.setFillColor(color)
        c.drawString(x, y, text)
        c.restoreState()
