from .config import DigitViewConfig
from .cell import IntegerCell, IntegerWidth
from .accessor import DigitReader, DigitRef, swap
from .cursor import ConstDigitCursor, DigitCursor, Direction
from .view import DigitView, compute_weight, total_digits
from . import algorithms

__all__ = [
    "DigitViewConfig",
    "IntegerCell",
    "IntegerWidth",
    "DigitReader",
    "DigitRef",
    "swap",
    "ConstDigitCursor",
    "DigitCursor",
    "Direction",
    "DigitView",
    "compute_weight",
    "total_digits",
    "algorithms",
]
