"""Gradient: colors interpolated over ordered control points in ``[0, 1]``."""

from __future__ import annotations

import bisect
from typing import Any, Iterable, Iterator, Mapping

from stylesmith.errors import ColorError, GradientError
from stylesmith.model.bounded import UnitInterval
from stylesmith.model.color import (
    Color,
    Hsla,
    NormalizedHsla,
    NormalizedRgba,
    Rgba,
    _round,
    color_from_json,
    color_to_json,
)

Position = UnitInterval | float


def _position(value: Position) -> UnitInterval:
    if isinstance(value, UnitInterval):
        return value
    bounded = UnitInterval.new(value)
    if bounded is None:
        raise GradientError(f"{value} not in bounds [0,1]")
    return bounded


class Gradient:
    """An ordered mapping of positions in ``[0, 1]`` to colors.

    A gradient always has control points at exactly ``0`` and ``1``.  Colors
    between control points are interpolated component-wise in the normalized
    space both neighbours share: HSLA when both are HSL colors, RGBA when
    both are hex/RGB colors.  There is no blending rule across the two
    spaces, so such a lookup raises :class:`GradientError`.
    """

    def __init__(self, points: Mapping[Position, Color] | Iterable[tuple[Position, Color]]) -> None:
        items = points.items() if isinstance(points, Mapping) else points
        self._points: dict[UnitInterval, Color] = {}
        for position, color in items:
            self._points[_position(position)] = color
        self._keys: list[UnitInterval] = sorted(self._points)
        if UnitInterval.MIN not in self._points or UnitInterval.MAX not in self._points:
            raise GradientError("must specify 0 value and 1 value in gradient")

    @classmethod
    def between(cls, low: Color, high: Color) -> Gradient:
        return cls({UnitInterval.MIN: low, UnitInterval.MAX: high})

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Gradient:
        """Build a gradient from ``{"0": color, "0.5": color, "1": color}``."""
        points: list[tuple[UnitInterval, Color]] = []
        for key, value in data.items():
            try:
                number = float(key)
            except (TypeError, ValueError) as exc:
                raise GradientError(f"invalid gradient position {key!r}", cause=exc) from exc
            try:
                color = color_from_json(value)
            except ValueError as exc:
                raise GradientError(str(exc), cause=exc) from exc
            points.append((_position(number), color))
        return cls(points)

    def to_json(self) -> dict[str, Any]:
        return {str(pos): color_to_json(color) for pos, color in self}

    # --- lookup --------------------------------------------------------------

    def _neighbours(self, position: UnitInterval) -> tuple[UnitInterval, UnitInterval]:
        """Nearest control point <= position and nearest >= position."""
        hi = bisect.bisect_left(self._keys, position)
        lo = bisect.bisect_right(self._keys, position) - 1
        return self._keys[lo], self._keys[hi]

    def _interpolate(self, position: UnitInterval) -> Color:
        low_pt, high_pt = self._neighbours(position)
        low = self._points[low_pt]
        high = self._points[high_pt]
        if low_pt == high_pt or low == high:
            return low

        t = (position - low_pt) / (high_pt - low_pt)
        try:
            low_simple = low.normalize()
            high_simple = high.normalize()
        except ColorError as exc:
            raise GradientError(f"can not interpolate {low} and {high}", cause=exc) from exc

        if isinstance(low_simple, NormalizedHsla) and isinstance(high_simple, NormalizedHsla):
            h, s, l, a = (  # noqa: E741
                (hv - lv) * t + lv for lv, hv in zip(low_simple, high_simple)
            )
            return Hsla(_round(h * 360.0), _round(s * 100.0), _round(l * 100.0), _round(a * 100.0))
        if isinstance(low_simple, NormalizedRgba) and isinstance(high_simple, NormalizedRgba):
            r, g, b, a = ((hv - lv) * t + lv for lv, hv in zip(low_simple, high_simple))
            return Rgba(_round(r), _round(g), _round(b), _round(a))
        raise GradientError(
            f"no interpolation between {type(low_simple).__name__} and "
            f"{type(high_simple).__name__} at {position}"
        )

    def get(self, position: Position) -> Color:
        """Return the stored color at *position*, or the interpolated one."""
        position = _position(position)
        stored = self._points.get(position)
        if stored is not None:
            return stored
        return self._interpolate(position)

    def get_or_insert(self, position: Position) -> Color:
        """Materialize a control point at *position* and return its color."""
        position = _position(position)
        if position not in self._points:
            self._points[position] = self._interpolate(position)
            bisect.insort(self._keys, position)
        return self._points[position]

    def inflect_at(self, position: Position) -> None:
        """Create a control point at *position* holding its interpolated color."""
        self.get_or_insert(position)

    def set(self, position: Position, color: Color) -> None:
        """Set the color of a control point, creating it if needed."""
        position = _position(position)
        if position not in self._points:
            bisect.insort(self._keys, position)
        self._points[position] = color

    def sample(self, steps: int = 100) -> list[Color]:
        """Evaluate the gradient at ``steps + 1`` evenly spaced positions."""
        if steps < 1:
            raise ValueError("steps must be at least 1")
        return [self.get(i / steps) for i in range(steps + 1)]

    def map_colors(self, fn: Any) -> Gradient:
        """Return a new gradient with *fn* applied to every control point."""
        return Gradient([(pos, fn(color)) for pos, color in self])

    # --- dunder helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[UnitInterval, Color]]:
        for key in self._keys:
            yield key, self._points[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, position: object) -> bool:
        if isinstance(position, (int, float)):
            bounded = UnitInterval.new(position)
            return bounded is not None and bounded in self._points
        return position in self._points

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Gradient):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        inner = ", ".join(f"{pos}: {color}" for pos, color in self)
        return f"Gradient({{{inner}}})"
