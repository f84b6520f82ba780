"""Thread-safe memoization of compiled styles."""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict

from stylesmith.compiler import compile_style
from stylesmith.model.style import Style
from stylesmith.model.theme import Theme
from stylesmith.model.theme_mode import ThemeMode
from stylesmith.stylesheet.model import Stylesheet

logger = logging.getLogger("stylesmith.cache")


def fingerprint(
    style: Style,
    mode: ThemeMode | str,
    theme: Theme,
    base_selector: str | None = None,
) -> str:
    """Identify one compile: style structure, resolved mode and theme identity.

    Callbacks contribute their identity, not their behavior, so two
    structurally equal styles holding different callbacks never collide.
    """
    resolved = ThemeMode.parse(mode).resolve()
    digest = hashlib.sha256()
    for part in (repr(style), resolved.value, str(id(theme)), base_selector or ""):
        digest.update(part.encode("utf-8"))
        digest.update(b"\x00")
    return digest.hexdigest()


class StyleCache:
    """LRU cache of compiled stylesheets keyed by :func:`fingerprint`.

    Compilation happens under the cache lock, so each fingerprint is
    compiled at most once while it stays cached.  The lock is reentrant: a
    callback may compile sub-styles through the same cache.  Entries hold a reference
    to nothing but the result; callers must keep themes alive while their
    entries are in use since theme identity is part of the key.
    """

    def __init__(self, maxsize: int = 256) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._lock = threading.RLock()
        self._entries: OrderedDict[str, Stylesheet] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get_or_compile(
        self,
        style: Style,
        mode: ThemeMode | str,
        theme: Theme,
        base_selector: str | None = None,
    ) -> Stylesheet:
        key = fingerprint(style, mode, theme, base_selector)
        with self._lock:
            sheet = self._entries.get(key)
            if sheet is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                logger.debug("cache hit: %s", key[:12])
                return sheet

            self.misses += 1
            logger.debug("cache miss: %s", key[:12])
            sheet = compile_style(style, mode, theme, base_selector)
            self._entries[key] = sheet
            if len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
            return sheet

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
