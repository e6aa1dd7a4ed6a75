from __future__ import annotations

import logging
import operator
from collections.abc import Sequence

from . import algorithms
from .accessor import DigitReader, DigitRef
from .cell import IntegerCell, IntegerWidth
from .config import DigitViewConfig, check_radix
from .cursor import ConstDigitCursor, DigitCursor, Direction


def total_digits(value: int, radix: int, width: IntegerWidth) -> int:
    """
    Number of radix digits in ``value``'s magnitude. Zero has exactly 1 digit.
    """
    u = width.magnitude(value)
    d = 0
    while True:
        d += 1
        u //= radix
        if u == 0:
            return d


def compute_weight(index: int, digits: int, radix: int, width: IntegerWidth,
                   direction: Direction = Direction.FORWARD) -> int:
    """
    Divisor isolating the digit at ``index`` (clamped to ``[0, digits]``).

    Forward numbering puts the most significant digit at index 0, reverse
    numbering the least significant one. Built by repeated multiplication in
    the unsigned counterpart width; a weight that does not fit that width
    comes back as 0.
    """
    index = min(digits, max(0, index))
    if direction is Direction.FORWARD:
        exponent = max(0, digits - 1 - index)
    else:
        exponent = index
    divisor = 1
    for _ in range(exponent):
        divisor *= radix
        if divisor > width.umax:
            return 0
    return divisor


class DigitView(Sequence):
    """
    Sequence of the digits of an integer held in a numpy array.

    Digits are numbered left to right: index 0 is the most significant digit
    and ``size() - 1`` the least significant. The view borrows the array
    element; it stores no digits and must not outlive the array. Reads decode
    on demand, writes re-encode the element in place.

    A view over a read-only array (or over a plain int) hands out
    ``DigitReader`` accessors; otherwise indexing yields ``DigitRef``.

    An explicit ``digits`` count larger than the value's magnitude exposes
    leading zeros that may be written. A count smaller than the magnitude
    hides the high digits from indexing while they still sit in the value;
    the caller owns that situation.
    """

    def __init__(self, number, digits: int | None = None, *, radix: int | None = None, index=()):
        self.radix = check_radix(DigitViewConfig.default_radix if radix is None else radix)
        self.cell = IntegerCell.wrap_value(number, index)
        if digits is None:
            digits = total_digits(self.cell.get(), self.radix, self.cell.width)
        self._digits = max(0, operator.index(digits))
        self.reference_type = DigitRef if self.cell.writeable else DigitReader
        if DigitViewConfig.logging_enabled:
            logging.debug(f"[DigitView.__init__] value={self.cell.get()}, dtype={self.cell.width.dtype}, "
                          f"radix={self.radix}, digits={self._digits}, readonly={self.readonly}")

    @property
    def readonly(self) -> bool:
        return self.reference_type is DigitReader

    @property
    def number(self) -> int:
        return self.cell.get()

    def __int__(self):
        return self.cell.get()

    def size(self) -> int:
        return self._digits

    def __len__(self):
        return self._digits

    def weight_for(self, index: int, direction: Direction = Direction.FORWARD) -> int:
        return compute_weight(index, self._digits, self.radix, self.cell.width, direction)

    def __getitem__(self, index) -> DigitReader:
        index = operator.index(index)
        return self.reference_type(self.cell, self.radix, self.weight_for(index))

    def __setitem__(self, index, digit):
        ref = self[index]
        if not isinstance(ref, DigitRef):
            raise TypeError("digit view over a read-only integer does not support assignment")
        ref.set(digit)

    def __iter__(self):
        for i in range(self._digits):
            yield self[i]

    def __reversed__(self):
        for i in range(self._digits):
            yield self.reference_type(self.cell, self.radix, self.weight_for(i, Direction.REVERSE))

    def index(self, value, start=0, stop=None):
        stop = self._digits if stop is None else min(stop, self._digits)
        for i in range(max(0, start), stop):
            if self[i] == value:
                return i
        raise ValueError(f"{value!r} is not a digit of {self.number}")

    def values(self) -> list[int]:
        return [d.value for d in self]

    # forward cursors
    def begin(self) -> DigitCursor:
        return DigitCursor(self, 0)

    def end(self) -> DigitCursor:
        return DigitCursor(self, self._digits)

    def cbegin(self) -> ConstDigitCursor:
        return ConstDigitCursor(self, 0)

    def cend(self) -> ConstDigitCursor:
        return ConstDigitCursor(self, self._digits)

    # reverse cursors
    def rbegin(self) -> DigitCursor:
        return DigitCursor(self, 0, Direction.REVERSE)

    def rend(self) -> DigitCursor:
        return DigitCursor(self, self._digits, Direction.REVERSE)

    def crbegin(self) -> ConstDigitCursor:
        return ConstDigitCursor(self, 0, Direction.REVERSE)

    def crend(self) -> ConstDigitCursor:
        return ConstDigitCursor(self, self._digits, Direction.REVERSE)

    def reverse(self):
        algorithms.reverse(self.begin(), self.end())

    def sort(self, *, reverse: bool = False):
        if reverse:
            algorithms.sort(self.rbegin(), self.rend())
        else:
            algorithms.sort(self.begin(), self.end())

    def __repr__(self):
        return f"DigitView({self.number}, radix={self.radix}, digits={self._digits})"
