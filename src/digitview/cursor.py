from __future__ import annotations

import operator
from enum import Enum
from functools import total_ordering

from .accessor import DigitReader


class Direction(Enum):
    FORWARD = "forward"   # most significant digit first
    REVERSE = "reverse"   # least significant digit first


@total_ordering
class DigitCursor:
    """
    Random-access position over a DigitView.

    The position lives in ``[0, size]``; ``size`` is the one-past-the-end
    sentinel in both directions. All arithmetic clamps into that range.
    Dereferencing computes the digit weight from the position and the
    direction, so reverse traversal needs no reversed copy of anything.
    """
    __slots__ = ("view", "position", "direction")

    def __init__(self, view, position: int = 0, direction: Direction = Direction.FORWARD):
        self.view = view
        self.direction = direction
        self.position = self._clamp(position)

    def _clamp(self, position: int) -> int:
        return min(len(self.view), max(0, position))

    def _accessor_type(self):
        return self.view.reference_type

    def _moved(self, position: int):
        return type(self)(self.view, position, self.direction)

    def deref(self) -> DigitReader:
        weight = self.view.weight_for(self.position, self.direction)
        return self._accessor_type()(self.view.cell, self.view.radix, weight)

    def __getitem__(self, offset: int) -> DigitReader:
        return (self + offset).deref()

    def advance(self):
        if self.position < len(self.view):
            self.position += 1
        return self

    def retreat(self):
        if self.position > 0:
            self.position -= 1
        return self

    def post_advance(self):
        prior = self._moved(self.position)
        self.advance()
        return prior

    def post_retreat(self):
        prior = self._moved(self.position)
        self.retreat()
        return prior

    def _same_walk(self, other) -> bool:
        return isinstance(other, DigitCursor) and other.direction is self.direction

    def __add__(self, offset: int):
        try:
            offset = operator.index(offset)
        except TypeError:
            return NotImplemented
        return self._moved(self.position + offset)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, DigitCursor):
            if not self._same_walk(other):
                return NotImplemented
            return self.position - other.position
        try:
            other = operator.index(other)
        except TypeError:
            return NotImplemented
        return self._moved(self.position - other)

    def __iadd__(self, offset: int):
        offset = operator.index(offset)
        self.position = self._clamp(self.position + offset)
        return self

    def __isub__(self, offset: int):
        offset = operator.index(offset)
        self.position = self._clamp(self.position - offset)
        return self

    def __eq__(self, other):
        if not self._same_walk(other):
            return NotImplemented
        return self.position == other.position

    def __lt__(self, other):
        if not self._same_walk(other):
            return NotImplemented
        return self.position < other.position

    def __repr__(self):
        return f"{type(self).__name__}(position={self.position}, direction={self.direction.value})"


class ConstDigitCursor(DigitCursor):
    """Cursor whose dereference is always read-only."""
    __slots__ = ()

    def _accessor_type(self):
        return DigitReader
