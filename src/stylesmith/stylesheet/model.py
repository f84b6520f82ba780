"""Compiled stylesheet model: Declaration, CssRule and Stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

Block = tuple[str, tuple[str, ...], list["Declaration"]]


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str


@dataclass(frozen=True)
class CssRule:
    """A flattened rule: the full selector plus the at-rules wrapping it.

    ``children`` are rules compiled from nested style entries, in the
    order they appeared.
    """

    selector: str
    conditions: tuple[str, ...] = ()
    declarations: list[Declaration] = field(default_factory=list)
    children: list[CssRule] = field(default_factory=list)


@dataclass(frozen=True)
class Stylesheet:
    """The result of compiling a Style."""

    root: CssRule

    def blocks(self) -> Iterator[Block]:
        """Yield ``(selector, conditions, declarations)`` in emission order.

        A rule's own declarations come before its nested rules, and a rule
        without declarations yields nothing for itself.
        """
        stack = [self.root]
        while stack:
            rule = stack.pop()
            if rule.declarations:
                yield rule.selector, rule.conditions, rule.declarations
            stack.extend(reversed(rule.children))

    def rules(self) -> Iterator[CssRule]:
        stack = [self.root]
        while stack:
            rule = stack.pop()
            yield rule
            stack.extend(reversed(rule.children))

    def to_css(self) -> str:
        """Render as ``sel {prop: value;}`` blocks, one per line."""
        return "\n".join(
            _render(selector, conditions, declarations, compact=False)
            for selector, conditions, declarations in self.blocks()
        )

    def to_style_str(self) -> str:
        """Render the compact form, e.g. ``@media q{sel {prop:value;}}``."""
        return "\n".join(
            _render(selector, conditions, declarations, compact=True)
            for selector, conditions, declarations in self.blocks()
        )

    def __str__(self) -> str:
        return self.to_css()


def _render(
    selector: str,
    conditions: tuple[str, ...],
    declarations: list[Declaration],
    *,
    compact: bool,
) -> str:
    if compact:
        body = "".join(f"{d.property}:{d.value};" for d in declarations)
    else:
        body = " ".join(f"{d.property}: {d.value};" for d in declarations)
    text = f"{selector} {{{body}}}" if selector else body
    for condition in reversed(conditions):
        text = f"{condition}{{{text}}}" if compact else f"{condition} {{{text}}}"
    return text
