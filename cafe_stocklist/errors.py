"""Exceptions raised by the stock list core."""


class StockListError(Exception):
    """Base class for stock list errors"""


class StockIndexError(StockListError, IndexError):
    """A category or item position is outside the current snapshot"""

    def __init__(self, what, index, size):
        super().__init__(f"{what} index {index} out of range (size {size})")
        self.what = what
        self.index = index
        self.size = size
