from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class IntegerWidth:
    """Fixed-width integer semantics of a numpy integer dtype."""
    dtype: np.dtype
    bits: int
    signed: bool

    @classmethod
    def of(cls, dtype) -> "IntegerWidth":
        dtype = np.dtype(dtype)
        if dtype.kind not in "iu":
            raise TypeError(f"digit views need an integer dtype, got {dtype}")
        info = np.iinfo(dtype)
        return cls(dtype=dtype, bits=info.bits, signed=dtype.kind == "i")

    @property
    def umax(self) -> int:
        # largest value of the unsigned counterpart
        return (1 << self.bits) - 1

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.umax

    def magnitude(self, value: int) -> int:
        """
        Absolute value computed in the unsigned counterpart of the width, so
        the minimum signed value does not overflow.
        """
        u = value & self.umax
        return (-u) & self.umax if value < 0 else u

    def wrap(self, value: int):
        """Reduce ``value`` into the dtype's range and return a dtype scalar."""
        u = value & self.umax
        if self.signed and u > self.max:
            u -= 1 << self.bits
        return self.dtype.type(u)


class IntegerCell:
    """
    Borrowed handle on one integer element of a numpy array.

    The cell never copies the element: every ``get`` reads ``array[index]``
    and every ``put`` assigns it, so changes made through other handles on
    the same array are observed immediately.
    """
    __slots__ = ("array", "index", "width")

    def __init__(self, array: np.ndarray, index=()):
        if np.shape(array[index]) != ():
            raise TypeError(f"index {index!r} does not select a single integer")
        self.array = array
        self.index = index
        self.width = IntegerWidth.of(array.dtype)

    @classmethod
    def wrap_value(cls, number, index=()) -> "IntegerCell":
        """
        Build a cell from an array (borrowed) or from an immutable int or
        numpy integer scalar (held in a private read-only 0-d array).
        """
        if isinstance(number, np.ndarray):
            return cls(number, index)
        if isinstance(number, (bool, np.bool_)):
            raise TypeError("bool is not an integer backing type")
        if isinstance(number, (int, np.integer)):
            array = np.asarray(number)
            array.flags.writeable = False
            return cls(array)
        raise TypeError(f"cannot view digits of {type(number).__name__}")

    @property
    def writeable(self) -> bool:
        return bool(self.array.flags.writeable)

    def get(self) -> int:
        return int(self.array[self.index])

    def put(self, value: int):
        self.array[self.index] = self.width.wrap(value)

    def magnitude(self) -> int:
        return self.width.magnitude(self.get())

    def __repr__(self):
        return f"IntegerCell({self.get()}, dtype={self.width.dtype})"
