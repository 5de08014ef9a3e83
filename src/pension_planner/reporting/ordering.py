"""Sort keys with explicit handling of absent values."""

from __future__ import annotations

from functools import total_ordering
from typing import Any


@total_ordering
class NullsLast:
    """Sort key wrapper that places ``None`` after every present value.

    Present values compare by natural order (reversed when ``descending``),
    an absent value is greater than any present value, and two absent
    values compare equal. Direction never moves absent values forward.
    """

    __slots__ = ("value", "descending")

    def __init__(self, value: Any, descending: bool = False) -> None:
        self.value = value
        self.descending = descending

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullsLast):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: NullsLast) -> bool:
        if self.value is None:
            return False
        if other.value is None:
            return True
        if self.descending:
            return self.value > other.value
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        direction = "desc" if self.descending else "asc"
        return f"NullsLast({self.value!r}, {direction})"
