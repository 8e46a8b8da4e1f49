"""In-memory stock take lists with a PDF report export."""

from .errors import StockIndexError, StockListError
from .export import StockExporter, report_filename
from .models import CategorySection, StockItem, parse_count
from .paginator import DrawInstruction, Page, ReportPaginator, TextStyle
from .seed import AKL_WLG, CAFE_STOCK, default_pages
from .share import EmailSharer, ExportSettings, ShareMetadata, share_metadata
from .stock_model import StockModel

__version__ = "0.1.0"
