"""Style compiler: resolve values and flatten nested selectors into CSS rules."""

from __future__ import annotations

import logging
from typing import Iterator

from stylesmith.errors import CompileError, ThemeResolutionError
from stylesmith.model.style import Style
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode
from stylesmith.model.value import (
    Callback,
    ClassVar,
    CssLiteral,
    Nested,
    StyleValue,
    ThemeToken,
)
from stylesmith.properties import TranslationUnit
from stylesmith.stylesheet.model import CssRule, Declaration, Stylesheet

logger = logging.getLogger("stylesmith.compiler")

# Fragments starting with these attach directly to the parent selector.
_COMBINATORS = (",", ">", "~", "+")


def combine_selector(current: str, fragment: str) -> str:
    """Compose a nested selector *fragment* onto the *current* selector.

    ``>``, ``~``, ``+`` and ``,`` attach directly, a leading ``&`` is
    replaced by the parent selector, anything else is a descendant.
    """
    if fragment.startswith(_COMBINATORS):
        return current + fragment
    if fragment.startswith("&"):
        return current + fragment[1:]
    if not current:
        return fragment
    return f"{current} {fragment}"


class _Resolver:
    """Reduces a style value to a terminal value against one theme and mode."""

    def __init__(self, theme: Theme, mode: ThemeMode) -> None:
        self.theme = theme
        self.mode = mode

    def resolve(self, value: StyleValue) -> StyleValue:
        while isinstance(value, Callback):
            value = value.evaluate(self.theme)
        if isinstance(value, ThemeToken):
            return CssLiteral(f"var({self.palette_var(value)})")
        if isinstance(value, ClassVar):
            return CssLiteral(self.class_var(value))
        return value

    def palette_var(self, token: ThemeToken) -> str:
        palette = self.theme.get_palette(token.palette)
        if palette is None:
            raise ThemeResolutionError(
                f"no palette named {token.palette!r} found",
                palette=token.palette,
                selector=token.selector,
            )
        if palette.select(token.selector, self.mode) is None:
            raise ThemeResolutionError(
                f"could not find selector {token.selector!r} in palette {token.palette!r}",
                palette=token.palette,
                selector=token.selector,
            )
        return self.theme.palette_var(token.palette, token.selector)

    def class_var(self, value: ClassVar) -> str:
        if not self.theme.has_class_var(value.class_name, value.var):
            raise ThemeResolutionError(
                f"no variable {value.var!r} declared for class {value.class_name!r}",
                class_name=value.class_name,
                var=value.var,
            )
        name = self.theme.class_var(value.class_name, value.var)
        if value.fallback is None:
            return f"var({name})"
        fallback = self.resolve(value.fallback)
        return f"var({name}, {_to_css(fallback, 'fallback')})"


def _to_css(value: StyleValue, key: str) -> str:
    text = value.to_css()
    if text is None:
        raise CompileError(f"{key!r}: {value!r} can not be rendered as CSS")
    return text


def _child_rule(parent: CssRule, fragment: str) -> CssRule:
    if fragment.startswith("@"):
        return CssRule(parent.selector, parent.conditions + (fragment,))
    return CssRule(combine_selector(parent.selector, fragment), parent.conditions)


def compile_style(
    style: Style,
    mode: ThemeMode | str,
    theme: Theme,
    base_selector: str | None = None,
) -> Stylesheet:
    """Compile *style* into a :class:`Stylesheet`.

    ``ThemeMode.SYSTEM`` is resolved once, up front.  Theme references that
    don't exist in *theme* raise :class:`ThemeResolutionError` and abort the
    whole compile.  The tree is walked with an explicit stack, so nesting
    depth is not bounded by the interpreter's recursion limit.
    """
    mode = ThemeMode.parse(mode).resolve()
    resolver = _Resolver(theme, mode)
    unit = TranslationUnit(theme.breakpoints)

    root = CssRule(base_selector or "")
    stack: list[tuple[Iterator[tuple[str, StyleValue]], CssRule]] = [(style.items(), root)]
    logger.debug("compiling style: mode=%s base=%r", mode.value, base_selector)

    while stack:
        entries, rule = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        key, value = entry
        value = resolver.resolve(value)
        if isinstance(value, Nested):
            frames = []
            for fragment in unit.translate(key):
                child = _child_rule(rule, fragment)
                rule.children.append(child)
                frames.append((value.style.items(), child))
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(
                        "selector stack: %s",
                        [frame_rule.selector for _, frame_rule in stack] + [child.selector],
                    )
            # Last pushed is compiled first; children already hold their order.
            stack.extend(reversed(frames))
            continue

        if unit.is_breakpoint(key):
            raise CompileError(f"breakpoint {key!r} must hold a nested style, got {value!r}")
        css = _to_css(value, key)
        for prop in unit.translate(key):
            rule.declarations.append(Declaration(prop, css))

    sheet = Stylesheet(root)
    logger.debug("compiled style: %d rule(s)", sum(1 for _ in sheet.blocks()))
    return sheet


def compile_css(
    style: Style,
    mode: ThemeMode | str,
    theme: Theme,
    base_selector: str | None = None,
    *,
    compact: bool = False,
) -> str:
    """Compile *style* straight to CSS text.

    The default is the spaced form, ``sel {prop: value;}``.  With *compact*
    the mounting form is returned instead, ``@media q{sel {prop:value;}}``.
    """
    sheet = compile_style(style, mode, theme, base_selector)
    return sheet.to_style_str() if compact else sheet.to_css()
