from __future__ import annotations

import logging
import operator
from functools import total_ordering

from .cell import IntegerCell
from .config import DigitViewConfig


@total_ordering
class DigitReader:
    """
    Read-only indirect access to one digit of a backing integer.

    Holds the cell, the radix and the positional weight isolating the digit;
    the digit itself is decoded on every read. A weight of 0 marks a position
    the integer's width cannot reach, which always reads as 0.
    """
    __slots__ = ("_cell", "radix", "weight")

    def __init__(self, cell: IntegerCell, radix: int, weight: int):
        self._cell = cell
        self.radix = radix
        self.weight = weight

    @property
    def value(self) -> int:
        if self.weight == 0:
            return 0
        return (self._cell.magnitude() // self.weight) % self.radix

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __bool__(self):
        return self.value != 0

    def __str__(self):
        return str(self.value)

    def __format__(self, spec):
        return format(self.value, spec)

    def __repr__(self):
        return f"{type(self).__name__}({self.value}, weight={self.weight})"

    def __eq__(self, other):
        try:
            return self.value == operator.index(other)
        except TypeError:
            return NotImplemented

    def __lt__(self, other):
        try:
            return self.value < operator.index(other)
        except TypeError:
            return NotImplemented

    # arithmetic works on decoded values and yields plain ints
    def __add__(self, other):
        return self.value + other

    def __radd__(self, other):
        return other + self.value

    def __sub__(self, other):
        return self.value - other

    def __rsub__(self, other):
        return other - self.value

    def __mul__(self, other):
        return self.value * other

    def __rmul__(self, other):
        return other * self.value


class DigitRef(DigitReader):
    """
    Mutable indirect access to one digit; writes re-encode the backing
    integer in place, keeping its sign and every other digit.
    """
    __slots__ = ()

    def reader(self) -> DigitReader:
        return DigitReader(self._cell, self.radix, self.weight)

    def set(self, digit) -> "DigitRef":
        digit = operator.index(digit) % self.radix
        if self.weight == 0:
            return self
        cell = self._cell
        number = cell.get()
        is_negative = number < 0
        mag = cell.width.magnitude(number)
        mag -= ((mag // self.weight) % self.radix) * self.weight
        mag += digit * self.weight
        cell.put(-mag if is_negative else mag)
        if DigitViewConfig.logging_enabled and DigitViewConfig.verbosity >= 2:
            logging.debug(f"[DigitRef.set] weight={self.weight}, digit={digit}, {number} -> {cell.get()}")
        return self

    def increment(self) -> "DigitRef":
        return self.set(self.value + 1)

    def decrement(self) -> "DigitRef":
        return self.set(self.value - 1)

    def post_increment(self) -> int:
        prior = self.value
        self.set(prior + 1)
        return prior

    def post_decrement(self) -> int:
        prior = self.value
        self.set(prior - 1)
        return prior

    def __iadd__(self, other):
        return self.set(self.value + operator.index(other))

    def __isub__(self, other):
        return self.set(self.value - operator.index(other))

    def swap(self, other: "DigitRef"):
        """Swaps the underlying digit values, not the accessors."""
        d1 = self.value
        d2 = other.value
        self.set(d2)
        other.set(d1)


def swap(a: DigitRef, b: DigitRef):
    if not (isinstance(a, DigitRef) and isinstance(b, DigitRef)):
        raise TypeError("swap needs two mutable digit references")
    a.swap(b)
