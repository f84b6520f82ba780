"""Style: an ordered tree of CSS properties, nested rules and theme references."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Iterator

from stylesmith.model.value import Nested, StyleValue, to_value
from stylesmith.properties import expand_shorthand

if TYPE_CHECKING:
    from stylesmith.model.theme import Theme
    from stylesmith.model.theme_mode import ThemeMode
    from stylesmith.stylesheet.model import Stylesheet


class Style:
    """Ordered mapping of property key to :class:`StyleValue`.

    Keys are shorthand-expanded and normalized when inserted, so
    ``Style(pX="10px")`` holds both ``margin-left`` and ``margin-right``.
    Values given as plain Python objects are coerced with :func:`to_value`;
    dicts and nested ``Style`` objects become sub-rules.

    A style is built up with :meth:`insert` and :meth:`merge` and should be
    treated as immutable once handed to the compiler.
    """

    def __init__(
        self,
        mapping: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        /,
        **props: Any,
    ) -> None:
        self._props: dict[str, StyleValue] = {}
        if mapping is not None:
            if isinstance(mapping, (Mapping, Style)):
                items = mapping.items()
            else:
                items = mapping
            for key, value in items:
                self.insert(key, value)
        for key, value in props.items():
            self.insert(key, value)

    def insert(self, key: str, value: Any) -> None:
        """Store *value* under every property *key* expands to."""
        value = to_value(value)
        for name in expand_shorthand(key):
            self._props[name] = value

    def merge(self, other: Style) -> Style:
        """Return a new style combining ``self`` with *other*.

        Keys only in *other* are adopted.  Where both sides hold a sub-rule
        the two are merged recursively; any other conflict keeps ``self``'s
        value.
        """
        merged = self.copy()
        for key, value in other._props.items():
            current = merged._props.get(key)
            if current is None:
                merged._props[key] = value
            elif isinstance(current, Nested) and isinstance(value, Nested):
                merged._props[key] = Nested(current.style.merge(value.style))
        return merged

    def copy(self) -> Style:
        clone = Style()
        clone._props = dict(self._props)
        return clone

    def items(self) -> Iterator[tuple[str, StyleValue]]:
        return iter(self._props.items())

    def properties(self) -> Iterator[str]:
        return iter(self._props)

    def get(self, key: str, default: StyleValue | None = None) -> StyleValue | None:
        return self._props.get(key, default)

    def to_css(
        self, mode: ThemeMode, theme: Theme, base: str | None = None
    ) -> Stylesheet:
        """Compile this style against *theme*; see :func:`compile_style`."""
        from stylesmith.compiler import compile_style

        return compile_style(self, mode, theme, base_selector=base)

    def __getitem__(self, key: str) -> StyleValue:
        return self._props[key]

    def __contains__(self, key: object) -> bool:
        return key in self._props

    def __len__(self) -> int:
        return len(self._props)

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __bool__(self) -> bool:
        return bool(self._props)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Style):
            return self._props == other._props
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Style({self._props!r})"
