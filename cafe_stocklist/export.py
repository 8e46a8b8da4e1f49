from __future__ import annotations

import logging
import smtplib
from datetime import datetime
from pathlib import Path
from typing import Optional

from .paginator import ReportPaginator, report_title
from .renderer import CanvasRenderer, DocumentRenderer
from .share import Sharer, share_metadata

logger = logging.getLogger(__name__)

FILENAME_TIMESTAMP = "%Y%m%d_%H%M%S"


def report_filename(page_name, when: datetime) -> str:
    return f"{page_name}_StockList_{when.strftime(FILENAME_TIMESTAMP)}.pdf"


class StockExporter:
    """
    Paginate a snapshot, render it to a PDF file and hand the file on.

    Rendering errors reach the caller. Sharing is fire-and-forget: a failed
    send is logged and the written file is still returned.
    """

    def __init__(self, sharer: Optional[Sharer] = None, output_dir=".",
                 renderer: Optional[DocumentRenderer] = None,
                 paginator=None, clock=datetime.now):
        self.sharer = sharer
        self.output_dir = Path(output_dir)
        self.renderer = renderer
        self.paginator = paginator or ReportPaginator()
        self.clock = clock

    def export(self, page_name, categories) -> Path:
        # one snapshot, one timestamp for the whole export
        categories = tuple(categories)
        when = self.clock()

        pages = self.paginator.paginate(page_name, categories, when)
        renderer = self.renderer or CanvasRenderer(title=report_title(page_name))
        path = renderer.render(pages, self.output_dir / report_filename(page_name, when))
        logger.info("exported %r to %s", page_name, path)

        if self.sharer is not None:
            try:
                self.sharer.share(path, share_metadata(page_name, when))
            except (smtplib.SMTPException, OSError):
                logger.exception("sharing %s failed", path.name)
        return path
