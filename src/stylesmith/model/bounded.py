"""Numeric values constrained to an inclusive range."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import ClassVar


@total_ordering
class BoundedFloat:
    """A float guaranteed at construction to lie within ``[low, high]``.

    Instances are only created through :meth:`new`, which returns ``None``
    for NaN or out-of-range input.  Equality, ordering and hashing use the
    raw magnitude only, so bounded values can key ordered mappings.
    Addition and subtraction return plain floats because results may leave
    the domain.
    """

    __slots__ = ("_value", "_low", "_high")

    def __init__(self, value: float, low: float, high: float, *, _checked: bool = False) -> None:
        if not _checked:
            raise TypeError("use BoundedFloat.new() to construct bounded values")
        self._value = float(value)
        self._low = low
        self._high = high

    @classmethod
    def new(cls, value: float, low: float, high: float) -> BoundedFloat | None:
        """Return a bounded value, or ``None`` if *value* is NaN or out of range."""
        value = float(value)
        if math.isnan(value) or not (low <= value <= high):
            return None
        return cls(value, low, high, _checked=True)

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedFloat):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: BoundedFloat) -> bool:
        if isinstance(other, BoundedFloat):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __sub__(self, other: BoundedFloat) -> float:
        return self._value - float(other)

    def __add__(self, other: BoundedFloat) -> float:
        return self._value + float(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return f"{self._value:g}"


class UnitInterval(BoundedFloat):
    """The ``[0, 1]`` domain used for gradient positions."""

    __slots__ = ()

    MIN: ClassVar[UnitInterval]
    MAX: ClassVar[UnitInterval]

    def __init__(self, value: float, low: float = 0.0, high: float = 1.0, *, _checked: bool = False) -> None:
        super().__init__(value, 0.0, 1.0, _checked=_checked)

    @classmethod
    def new(cls, value: float) -> UnitInterval | None:  # type: ignore[override]
        bounded = BoundedFloat.new(value, 0.0, 1.0)
        return None if bounded is None else cls(float(bounded), _checked=True)


UnitInterval.MIN = UnitInterval(0.0, _checked=True)
UnitInterval.MAX = UnitInterval(1.0, _checked=True)
