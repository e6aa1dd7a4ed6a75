"""
Sequence algorithms over half-open cursor ranges ``[first, last)``.

They only read, write, compare and swap accessors; digit weights never show
up here. Cursors passed in are not modified.
"""
from __future__ import annotations

from .accessor import swap
from .cursor import DigitCursor


def iter_swap(a: DigitCursor, b: DigitCursor):
    swap(a.deref(), b.deref())


def reverse(first: DigitCursor, last: DigitCursor):
    lo = first + 0
    hi = last + 0
    while lo < hi:
        hi.retreat()
        if not lo < hi:
            break
        iter_swap(lo, hi)
        lo.advance()


def sort(first: DigitCursor, last: DigitCursor):
    """Stable ascending sort (insertion sort by adjacent swaps)."""
    n = last - first
    for i in range(1, n):
        j = first + i
        while j > first and j[-1] > j.deref():
            iter_swap(j - 1, j)
            j.retreat()


def is_sorted(first: DigitCursor, last: DigitCursor) -> bool:
    n = last - first
    return all(not first[i] < first[i - 1] for i in range(1, n))


def find(first: DigitCursor, last: DigitCursor, value) -> DigitCursor:
    it = first + 0
    while it < last:
        if it.deref() == value:
            return it
        it.advance()
    return last + 0


def search(first: DigitCursor, last: DigitCursor, needle) -> DigitCursor:
    """First position where the digits ``needle`` occur in order, else ``last``."""
    needle = [int(d) for d in needle]
    span = last - first
    for start in range(span - len(needle) + 1):
        it = first + start
        if all(it[k] == d for k, d in enumerate(needle)):
            return it
    return last + 0
